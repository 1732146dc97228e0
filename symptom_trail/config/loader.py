"""SymptomTrail — Завантаження конфігурації"""
import yaml
from pathlib import Path
from dataclasses import asdict
from .settings import SymptomTrailConfig


def save_yaml(config: SymptomTrailConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(asdict(config), f, default_flow_style=False, allow_unicode=True)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_config(config: SymptomTrailConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> SymptomTrailConfig:
    return SymptomTrailConfig.from_dict(load_yaml(path))
