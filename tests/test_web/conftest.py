from __future__ import annotations

from pathlib import Path

import pytest

from seam.web.app import create_app
from seam.workspace import Workspace

APP_SOURCE = """\
import { useState } from 'react';

export default function App() {
  const [isActive, setActive] = useState(false);
  return (
    <div className="p-4">
      <h1 className="text-4xl font-bold">Hello</h1>
      <button className={isActive ? 'bg-green-500' : 'bg-red-500'}>Go</button>
      <p>one</p>
      <p>two</p>
    </div>
  );
}
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A throwaway project with a discoverable src/App.tsx."""
    source = tmp_path / "src" / "App.tsx"
    source.parent.mkdir(parents=True)
    source.write_text(APP_SOURCE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def app(project: Path):
    """Create a Flask app for testing."""
    application = create_app(Workspace(project))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()


def read_app(project: Path) -> str:
    return (project / "src" / "App.tsx").read_text(encoding="utf-8")
