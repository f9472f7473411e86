import json
import yaml
from typing import Any, Callable
from pathlib import Path

from pydantic import ValidationError

from checkpoint.config.models.check import CheckSuiteConfig
from checkpoint.config.preprocessor import ConfigPreprocessor, ConfigValue
from checkpoint.core.exceptions import ConfigurationError


class ConfigLoader:
    """
    Load + preprocess + validate check suites from YAML/JSON.

    - Preprocessors run on raw data before Pydantic validation.
    - Result is a fully validated CheckSuiteConfig
    """

    def __init__(self, preprocessors: list[ConfigPreprocessor] | None = None):
        self._preprocessors = preprocessors or []

    def add_preprocessor(self, preprocessor: ConfigPreprocessor) -> None:
        self._preprocessors.append(preprocessor)

    def from_yaml(self, source: str | Path) -> CheckSuiteConfig:
        data = self._load(source, parser=yaml.safe_load)
        return self._build(data)

    def from_json(self, source: str | Path) -> CheckSuiteConfig:
        data = self._load(source, parser=json.loads)
        return self._build(data)

    def _load(
        self,
        source: str | Path,
        *,
        parser: Callable[[str], Any],
    ) -> ConfigValue:
        """
        Load config from a file path or raw string, then parse.
        """
        text = self._read_source(source)
        try:
            return parser(text)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"could not parse check config: {e}") from e

    def _read_source(self, source: str | Path) -> str:
        """
        Read source as text.
        If `source` is a file path, read it.
        Otherwise treat it as raw content.
        """
        if isinstance(source, Path):
            return source.read_text()

        # single-line strings may be paths; multi-line strings are content
        if "\n" not in source:
            p = Path(source)
            if p.is_file():
                return p.read_text()

        return source

    def _build(self, data: ConfigValue) -> CheckSuiteConfig:
        """
        Apply preprocessors and validate into CheckSuiteConfig.
        """
        for pre in self._preprocessors:
            data = pre.process(data)

        try:
            return CheckSuiteConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"invalid check config: {e}") from e
