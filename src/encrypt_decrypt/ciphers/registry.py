"""Cipher strategy registry.

This module maps each :class:`~encrypt_decrypt.models.Algorithm` to the
cipher strategy implementing it, and discovers the built-in strategies from
the :mod:`encrypt_decrypt.ciphers.plugins` package.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Any, Dict, List, Optional, Type

from encrypt_decrypt.exceptions import UnknownAlgorithmError
from encrypt_decrypt.models import Algorithm

from .core import CipherStrategy

logger = logging.getLogger(__name__)


class CipherRegistry:
    """Registry for cipher strategy discovery and selection."""

    def __init__(self) -> None:
        self._plugins: Dict[Algorithm, Type[CipherStrategy]] = {}
        self._plugin_info: Dict[Algorithm, Dict[str, Any]] = {}

    def register_plugin(
        self, plugin_class: Type[CipherStrategy], override: bool = False
    ) -> None:
        """Register a cipher strategy.

        Parameters
        ----------
        plugin_class : Type[CipherStrategy]
            The cipher strategy class to register.
        override : bool, optional
            Whether to override existing registrations, by default False.

        Raises
        ------
        ValueError
            If the class is not a cipher strategy, declares no algorithm, or
            its algorithm is already registered and override=False.
        """
        if not isinstance(plugin_class, type) or not issubclass(
            plugin_class, CipherStrategy
        ):
            raise ValueError(f"Plugin {plugin_class} must inherit from CipherStrategy")

        algorithm = plugin_class.algorithm
        if algorithm is None:
            raise ValueError(f"Plugin {plugin_class.name()} does not declare an algorithm")

        # Check for conflicts
        if algorithm in self._plugins and not override:
            existing = self._plugins[algorithm]
            raise ValueError(
                f"Algorithm '{algorithm.value}' already registered by {existing.__module__}.{existing.__name__}. "
                f"Use override=True to replace."
            )

        self._plugins[algorithm] = plugin_class
        self._plugin_info[algorithm] = plugin_class.get_schema_info()

        logger.info(
            f"Registered cipher '{algorithm.value}' "
            f"from {plugin_class.__module__}.{plugin_class.__name__}"
        )

    def get_plugin(self, algorithm: Algorithm | str) -> Optional[Type[CipherStrategy]]:
        """Get the cipher strategy class registered for an algorithm.

        Parameters
        ----------
        algorithm : Algorithm | str
            The algorithm, or its name.

        Returns
        -------
        Optional[Type[CipherStrategy]]
            The strategy class or None if nothing is registered for it.

        Raises
        ------
        UnknownAlgorithmError
            If ``algorithm`` is not a member of :class:`Algorithm`.
        """
        return self._plugins.get(Algorithm.parse(algorithm))

    def instantiate_plugin(self, algorithm: Algorithm | str) -> CipherStrategy:
        """Instantiate the cipher strategy for an algorithm.

        Raises
        ------
        UnknownAlgorithmError
            If the algorithm is unknown or no strategy is registered for it.
        """
        algorithm = Algorithm.parse(algorithm)
        plugin_class = self.get_plugin(algorithm)

        if plugin_class is None:
            raise UnknownAlgorithmError(algorithm.value, self.list_plugins())

        return plugin_class()

    def list_plugins(self) -> List[str]:
        """List the names of the registered algorithms."""
        return [algorithm.value for algorithm in self._plugins]

    def get_plugin_info(self, algorithm: Algorithm | str) -> Optional[Dict[str, Any]]:
        """Get detailed information about a registered cipher."""
        return self._plugin_info.get(Algorithm.parse(algorithm))

    def discover_plugins(self, package_names: Optional[List[str]] = None) -> int:
        """Discover and register cipher strategies from the given packages.

        Parameters
        ----------
        package_names : Optional[List[str]], optional
            Packages to search. If None, searches the built-in plugins package.

        Returns
        -------
        int
            Number of strategies discovered and registered.
        """
        if package_names is None:
            package_names = ["encrypt_decrypt.ciphers.plugins"]

        discovered = 0
        for package_name in package_names:
            discovered += self._discover_from_package(package_name)

        return discovered

    def _discover_from_package(self, package_name: str) -> int:
        """Discover strategies from a specific package."""
        try:
            package = importlib.import_module(package_name)
        except ImportError:
            logger.debug(f"Package {package_name} not found, skipping cipher discovery")
            return 0

        package_path = getattr(package, "__path__", None)
        if package_path is None:
            return 0

        discovered = 0
        for _importer, modname, ispkg in pkgutil.iter_modules(package_path):
            if ispkg:
                continue

            module_name = f"{package_name}.{modname}"
            try:
                module = importlib.import_module(module_name)
            except Exception as e:
                logger.warning(f"Failed to import cipher module {module_name}: {e}")
                continue

            for attr in vars(module).values():
                if (
                    isinstance(attr, type)
                    and issubclass(attr, CipherStrategy)
                    and attr is not CipherStrategy
                    and attr.__module__ == module_name
                ):
                    if attr.algorithm is not None and self._plugins.get(attr.algorithm) is attr:
                        continue
                    try:
                        self.register_plugin(attr)
                        discovered += 1
                    except ValueError as e:
                        logger.warning(f"Failed to register cipher {module_name}.{attr.__name__}: {e}")

        return discovered


# Global registry instance
_registry = CipherRegistry()


# Public API
def get_registry() -> CipherRegistry:
    """Get the global cipher registry."""
    return _registry


def discover_plugins(package_names: Optional[List[str]] = None) -> int:
    """Discover and register cipher strategies from packages."""
    return _registry.discover_plugins(package_names)


def select_cipher(algorithm: Algorithm | str) -> CipherStrategy:
    """Return the cipher strategy implementing ``algorithm``.

    :raises UnknownAlgorithmError: If the algorithm is outside the known set.
    """
    return _registry.instantiate_plugin(algorithm)
