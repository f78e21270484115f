from pathlib import Path

import yaml
from pydantic import ValidationError

from credstore.rules.models import Rules


def load_rules(path: Path) -> Rules:
    """Read rules.yaml into Rules.

    A missing file raises FileNotFoundError; bad YAML or a schema violation
    raises ValueError. Sections left out of the file keep their defaults.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
