from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

# Global registry -- maps key result type -> ProgressFormula
_REGISTRY: dict[str, ProgressFormula] = {}


class InvalidConfigurationError(ValueError):
    """Raised by a formula when target/base can never yield a progress value."""


@dataclass(frozen=True)
class ProgressFormula:
    """A progress formula for one key result measurement type."""

    key_result_type: str
    label: str
    description: str
    formula_fn: Callable[[float, float, float], tuple[float, bool]]
    config_check: Optional[Callable[[float, float], None]] = None
    binary: bool = False

    def check_configuration(self, target: float, base: float) -> None:
        """Raise InvalidConfigurationError if target/base are unusable."""
        if self.config_check is not None:
            self.config_check(target, base)


def register_progress_formula(
    key_result_type: str,
    label: str,
    description: str,
    config_check: Optional[Callable[[float, float], None]] = None,
    binary: bool = False,
) -> Callable:
    """Decorator to register a formula function for a key result type."""

    def decorator(
        fn: Callable[[float, float, float], tuple[float, bool]],
    ) -> Callable[[float, float, float], tuple[float, bool]]:
        definition = ProgressFormula(
            key_result_type=key_result_type,
            label=label,
            description=description,
            formula_fn=fn,
            config_check=config_check,
            binary=binary,
        )
        _REGISTRY[key_result_type] = definition
        return fn

    return decorator


def get_formula(key_result_type: str) -> Optional[ProgressFormula]:
    """Look up a formula definition by key result type."""
    return _REGISTRY.get(key_result_type)


def get_all_formulas() -> dict[str, ProgressFormula]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)
