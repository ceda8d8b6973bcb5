"""Shared test fixtures for create-standard tests."""
import json
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from create_standard.core.catalog import TemplateCatalog
from create_standard.core.generator import GeneratorRunner
from create_standard.core.orchestrator import Choice, OperationCancelled


class ScriptedPrompter:
    """Prompter answering from prepared lists and recording every question.

    An ``OperationCancelled`` instance in an answer list is raised instead of
    returned, like a Ctrl-C at that prompt.
    """

    def __init__(self, texts=None, confirms=None, selects=None):
        self.texts = list(texts or [])
        self.confirms = list(confirms or [])
        self.selects = list(selects or [])
        self.asked: List[tuple] = []

    @staticmethod
    def _next(answers):
        if not answers:
            raise AssertionError("Unexpected prompt")
        answer = answers.pop(0)
        if isinstance(answer, OperationCancelled):
            raise answer
        return answer

    def text(self, message, default, validate=None):
        self.asked.append(("text", message, default))
        while True:
            answer = self._next(self.texts)
            if validate is None or validate(answer) is True:
                return answer

    def confirm(self, message):
        self.asked.append(("confirm", message))
        return self._next(self.confirms)

    def select(self, message: str, choices: Sequence[Choice], default: int = 0):
        self.asked.append(("select", message, [choice.value for choice in choices]))
        return self._next(self.selects)


class FakeGenerator(GeneratorRunner):
    """Generator that writes a minimal vite-like project instead of running npm."""

    def __init__(self, manifest: Optional[dict] = None):
        super().__init__(["npm", "create", "vite"])
        self.calls: List[tuple] = []
        self.manifest = manifest or {
            "name": "generated",
            "version": "0.0.0",
            "scripts": {"dev": "vite", "build": "vite build", "lint:es": "eslint ."},
            "dependencies": {"vue": "^3.2.47"},
            "devDependencies": {"vite": "^4.2.0", "eslint": "^8.0.0"},
        }

    def run(self, project_name: str, template_id: str, cwd: Path) -> None:
        self.calls.append((project_name, template_id, cwd))
        root = cwd / project_name
        root.mkdir(parents=True, exist_ok=True)
        (root / "index.html").write_text("<div id=app></div>")
        (root / "package.json").write_text(json.dumps(self.manifest))


@pytest.fixture
def catalog():
    """Two frameworks with one TypeScript variant each; only vue has an overlay."""
    return TemplateCatalog.model_validate({
        "common": {
            "scripts": {"lint:es": "eslint ./src --fix", "prepare": "husky install"},
            "devDependencies": {"eslint": "^8.36.0", "husky": "^8.0.3"},
        },
        "frameworks": [
            {
                "name": "vue",
                "color": "green",
                "overlay": {
                    "scripts": {"lint:style": "stylelint src --fix"},
                    "devDependencies": {"stylelint": "^15.3.0"},
                },
                "variants": [{"name": "vue-ts", "display": "TypeScript", "color": "magenta"}],
            },
            {
                "name": "react",
                "color": "cyan",
                "variants": [{"name": "react-ts", "display": "TypeScript", "color": "magenta"}],
            },
        ],
    })


@pytest.fixture
def overlay_dir(tmp_path):
    """Overlay root with a common tree and a vue-ts tree."""
    root = tmp_path / "standard"
    (root / "common" / ".husky").mkdir(parents=True)
    (root / "common" / ".eslintrc.cjs").write_text("common eslint")
    (root / "common" / ".husky" / "pre-commit").write_text("npm run lint:es")
    (root / "vue-ts").mkdir()
    (root / "vue-ts" / ".stylelintrc.cjs").write_text("vue stylelint")
    (root / "vue-ts" / ".eslintrc.cjs").write_text("vue eslint")
    return root


@pytest.fixture
def workspace(tmp_path):
    """Directory the CLI is run from."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def make_prompter():
    """Factory for ScriptedPrompter instances."""
    return ScriptedPrompter
