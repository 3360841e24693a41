from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List
import yaml

DEFAULT_SCENARIO_PATH = "config/demo_scenario.yaml"

def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def load_scenario(path: str | Path = DEFAULT_SCENARIO_PATH) -> List[Dict[str, Any]]:
    try:
        doc = load_yaml(path)
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: invalid YAML ({e})") from e
    if not isinstance(doc, dict):
        raise ValueError(f"{path}: expected a mapping with a 'steps' list")
    steps = doc.get("steps") or []
    if not isinstance(steps, list):
        raise ValueError(f"{path}: 'steps' must be a list")
    return steps
