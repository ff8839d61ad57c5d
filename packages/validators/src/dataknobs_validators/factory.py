"""Factory for building validators from configuration."""

import logging
import re
from collections.abc import Callable
from typing import Any

from dataknobs_config import FactoryBase

from .base import Validator
from .combinators import all_of, euphemize, not_, wun_of
from .exceptions import ValidatorConfigurationError
from .primitives import any_, literal, none, type_of
from .structures import array, object_
from .subjects import read_member
from .validators import boolean, function, integer, number, string

logger = logging.getLogger(__name__)


class ValidatorFactory(FactoryBase):
    """Factory for creating validators from configuration.

    Every validator configuration is a mapping with a ``type`` key. Wherever
    a nested validator is expected, a mapping is built recursively and any
    other value stands for itself as a literal.

    Configuration Options by type:
        any: no options
        boolean: no options
        number: min, max, exclusive_min, exclusive_max
        integer: min, max
        string: pattern (regular expression text), length (validator)
        function: length (validator for the arity)
        literal: value
        none: code, exhibits (list)
        type_of: expected (type tag)
        not: validator
        all_of: validators (list), exhaustive (bool, default False)
        wun_of: validators (list), or by_key (mapping) with classify_key,
            the member of the subject holding its classification
        array: items (list of positional validators) or item (one validator
            for every element), length, rest
        object: required, optional (mappings of key to validator) and
            allow_strays; or keys and values (validators for every entry)

    Example Configuration:
        validators:
          - name: shape
            factory: validator
            type: wun_of
            classify_key: kind
            by_key:
              circle:
                type: object
                required:
                  kind: circle
                  radius: {type: number, min: 0}
              square:
                type: object
                required:
                  kind: square
                  side: {type: number, min: 0}
    """

    def __init__(self) -> None:
        self._builders: dict[str, Callable[[dict[str, Any]], Validator]] = {
            "any": lambda config: any_(),
            "boolean": lambda config: boolean(),
            "number": self._build_number,
            "integer": self._build_integer,
            "string": self._build_string,
            "function": self._build_function,
            "literal": self._build_literal,
            "none": self._build_none,
            "type_of": self._build_type_of,
            "not": self._build_not,
            "all_of": self._build_all_of,
            "wun_of": self._build_wun_of,
            "array": self._build_array,
            "object": self._build_object,
        }

    def create(self, **config: Any) -> Validator:
        """Create a validator from configuration.

        Args:
            **config: Validator configuration

        Returns:
            Validator instance

        Raises:
            ValidatorConfigurationError: If the configuration is malformed
        """
        logger.info(f"Creating validator: {config.get('type')}")
        return self.build(config)

    def build(self, config: Any) -> Validator:
        if not isinstance(config, dict):
            raise ValidatorConfigurationError(
                f"Validator configuration must be a mapping, got {type(config).__name__}",
                config,
            )
        validator_type = config.get("type")
        if not validator_type:
            raise ValidatorConfigurationError("Validator configuration missing 'type'", config)
        builder = self._builders.get(str(validator_type).lower())
        if builder is None:
            raise ValidatorConfigurationError(f"Unknown validator type: {validator_type}", config)
        logger.debug(f"Building {validator_type} validator")
        return builder(config)

    def resolve(self, value: Any) -> Validator:
        """Build nested configuration, treating non-mappings as literals."""
        if isinstance(value, dict):
            return self.build(value)
        return euphemize(value)

    def _resolve_optional(self, config: dict[str, Any], key: str) -> Validator | None:
        if key not in config or config[key] is None:
            return None
        return self.resolve(config[key])

    def _resolve_list(self, config: dict[str, Any], key: str) -> list[Validator]:
        values = config.get(key, [])
        if not isinstance(values, list):
            raise ValidatorConfigurationError(f"'{key}' must be a list", config)
        return [self.resolve(value) for value in values]

    def _resolve_mapping(self, config: dict[str, Any], key: str) -> dict[str, Validator] | None:
        values = config.get(key)
        if values is None:
            return None
        if not isinstance(values, dict):
            raise ValidatorConfigurationError(f"'{key}' must be a mapping", config)
        return {name: self.resolve(value) for name, value in values.items()}

    def _build_number(self, config: dict[str, Any]) -> Validator:
        return number(
            config.get("min"),
            config.get("max"),
            bool(config.get("exclusive_min", False)),
            bool(config.get("exclusive_max", False)),
        )

    def _build_integer(self, config: dict[str, Any]) -> Validator:
        return integer(config.get("min"), config.get("max"))

    def _build_string(self, config: dict[str, Any]) -> Validator:
        if "pattern" in config and "length" in config:
            raise ValidatorConfigurationError("string takes either 'pattern' or 'length'", config)
        if "pattern" in config:
            try:
                return string(re.compile(config["pattern"]))
            except (re.error, TypeError) as e:
                raise ValidatorConfigurationError(f"Invalid pattern: {e}", config) from e
        return string(self._resolve_optional(config, "length"))

    def _build_function(self, config: dict[str, Any]) -> Validator:
        return function(self._resolve_optional(config, "length"))

    def _build_literal(self, config: dict[str, Any]) -> Validator:
        if "value" not in config:
            raise ValidatorConfigurationError("literal requires 'value'", config)
        return literal(config["value"])

    def _build_none(self, config: dict[str, Any]) -> Validator:
        exhibits = config.get("exhibits", [])
        try:
            return none(config.get("code", ""), *exhibits)
        except (ValueError, TypeError) as e:
            raise ValidatorConfigurationError(f"Invalid violation for none: {e}", config) from e

    def _build_type_of(self, config: dict[str, Any]) -> Validator:
        expected = config.get("expected")
        if not isinstance(expected, str):
            raise ValidatorConfigurationError("type_of requires an 'expected' type tag", config)
        return type_of(expected)

    def _build_not(self, config: dict[str, Any]) -> Validator:
        if "validator" not in config:
            raise ValidatorConfigurationError("not requires 'validator'", config)
        return not_(self.resolve(config["validator"]))

    def _build_all_of(self, config: dict[str, Any]) -> Validator:
        return all_of(
            self._resolve_list(config, "validators"),
            bool(config.get("exhaustive", False)),
        )

    def _build_wun_of(self, config: dict[str, Any]) -> Validator:
        by_key = self._resolve_mapping(config, "by_key")
        if by_key is None:
            return wun_of(self._resolve_list(config, "validators"))
        if "classify_key" not in config:
            raise ValidatorConfigurationError("wun_of with 'by_key' requires 'classify_key'", config)
        classify_key = config["classify_key"]

        def classify(subject: Any) -> Any:
            return read_member(subject, classify_key)

        return wun_of(by_key, classify)

    def _build_array(self, config: dict[str, Any]) -> Validator:
        length = self._resolve_optional(config, "length")
        if "items" in config:
            return array(
                self._resolve_list(config, "items"),
                length,
                self._resolve_optional(config, "rest"),
            )
        return array(self._resolve_optional(config, "item"), length)

    def _build_object(self, config: dict[str, Any]) -> Validator:
        required = self._resolve_mapping(config, "required")
        optional = self._resolve_mapping(config, "optional")
        if required is not None or optional is not None:
            return object_(required or {}, optional, bool(config.get("allow_strays", False)))
        return object_(
            self._resolve_optional(config, "keys"),
            self._resolve_optional(config, "values"),
        )


# Create singleton instance for registration
validator_factory = ValidatorFactory()
