# src/pathscope/io/config.py
from pathlib import Path

from pathscope.config.models import ScenarioModel


def load_scenario(path: str | Path) -> ScenarioModel:
    return ScenarioModel.model_validate_json(Path(path).expanduser().read_text(encoding="utf-8"))
