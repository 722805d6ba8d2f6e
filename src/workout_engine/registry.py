"""Evaluator registry with auto-discovery of DomainEvaluator subclasses."""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from workout_engine.evaluators.base import DomainEvaluator

logger = logging.getLogger(__name__)


def _evaluator_classes(module: ModuleType) -> list[type[DomainEvaluator]]:
    """Concrete DomainEvaluator subclasses defined in *module* itself."""
    return [
        cls
        for _, cls in inspect.getmembers(module, inspect.isclass)
        if issubclass(cls, DomainEvaluator)
        and cls.__module__ == module.__name__
        and not inspect.isabstract(cls)
    ]


class EvaluatorRegistry:
    """Maps domain names to evaluators.

    ``discover_evaluators`` imports every module of the evaluators package
    and instantiates the concrete DomainEvaluator subclasses it defines.
    Two discovered classes claiming the same domain is an error. A hand
    registration replaces whatever is registered for its domain.
    """

    def __init__(self) -> None:
        self._evaluators: dict[str, Any] = {}

    def discover_evaluators(self) -> None:
        """Register one instance of every evaluator in the evaluators package.

        Raises:
            ValueError: If two evaluator classes declare the same domain.
        """
        import workout_engine.evaluators as evaluators_pkg

        origins: dict[str, str] = {}
        for module_info in pkgutil.iter_modules(
            evaluators_pkg.__path__, prefix=evaluators_pkg.__name__ + "."
        ):
            try:
                module = importlib.import_module(module_info.name)
            except ImportError:
                logger.warning("Skipping evaluator module %s: import failed", module_info.name)
                continue

            for cls in _evaluator_classes(module):
                qualname = f"{cls.__module__}.{cls.__qualname__}"
                if cls.domain in origins:
                    raise ValueError(
                        f"Duplicate evaluator for domain {cls.domain!r}: "
                        f"{origins[cls.domain]} and {qualname}"
                    )
                origins[cls.domain] = qualname
                self.register(cls())

        logger.debug("Discovered evaluators for domains: %s", ", ".join(sorted(origins)))

    def register(self, evaluator: Any, domain: str | None = None) -> None:
        """Register *evaluator* under *domain* (defaults to ``evaluator.domain``).

        Raises:
            ValueError: If no domain is given or declared.
            TypeError: If the evaluator has no callable ``analyze``.
        """
        key = domain or getattr(evaluator, "domain", None)
        if not key:
            raise ValueError("Evaluator has no domain to register under")
        if not callable(getattr(evaluator, "analyze", None)):
            raise TypeError(f"Evaluator for domain {key!r} has no analyze() method")
        if key in self._evaluators:
            logger.debug("Replacing evaluator for domain %s", key)
        self._evaluators[key] = evaluator

    def get(self, domain: str) -> Any | None:
        return self._evaluators.get(domain)

    def as_mapping(self) -> Mapping[str, Any]:
        """A copy of the domain -> evaluator table."""
        return dict(self._evaluators)

    @property
    def domains(self) -> list[str]:
        return list(self._evaluators)
