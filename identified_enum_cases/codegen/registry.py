"""
Macro registry system for managing available member macros.

Provides explicit registration and instantiation of macros by the name
they are spelled with in source.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import MemberMacro

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class MacroRegistry:
    """Registry for managing available member macros."""

    def __init__(self):
        """Initialize empty registry."""
        self._macros: Dict[str, Type[MemberMacro]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        name: str,
        macro_class: Type[MemberMacro],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a macro under the attribute name it is spelled with.

        Args:
            name: Primary macro name (e.g. 'IdentifiedEnumCasesMacro')
            macro_class: Class implementing MemberMacro
            aliases: Alternative names for this macro
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If macro class is invalid or conflicts exist
        """
        if not (isinstance(macro_class, type) and issubclass(macro_class, MemberMacro)):
            raise RegistryError("Macro class must inherit from MemberMacro")

        name = name.lstrip("@")

        if name in self._macros and not replace:
            logger.debug("Macro %s already registered, skipping", name)
            return

        self._macros[name] = macro_class
        logger.debug("Registered macro %s -> %s", name, macro_class.__name__)

        for alias in aliases or []:
            alias = alias.lstrip("@")

            if alias == name:
                continue

            if not replace:
                if alias in self._macros:
                    raise RegistryError(f"Alias '{alias}' conflicts with existing macro name")
                if alias in self._aliases and self._aliases[alias] != name:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias]}'"
                    )

            self._aliases[alias] = name

    def unregister(self, name: str):
        """
        Unregister a macro and its aliases.

        Args:
            name: Macro name to unregister
        """
        name = name.lstrip("@")
        self._macros.pop(name, None)

        aliases_to_remove = [alias for alias, target in self._aliases.items() if target == name]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve_name(self, name: str) -> str:
        """Map a macro name or alias to its primary name."""
        name = name.lstrip("@")
        if name in self._macros:
            return name
        if name in self._aliases:
            return self._aliases[name]

        available = self.list_macros()
        raise RegistryError(
            f"No macro registered under the name: {name}. "
            f"Available: {', '.join(available) or 'none'}"
        )

    def get_macro_class(self, name: str) -> Type[MemberMacro]:
        """
        Get macro class by name.

        Args:
            name: Macro name or alias

        Returns:
            Macro class

        Raises:
            RegistryError: If name not found
        """
        return self._macros[self.resolve_name(name)]

    def create_macro(
        self,
        name: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> MemberMacro:
        """
        Create macro instance by name.

        Args:
            name: Macro name
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured macro instance

        Raises:
            RegistryError: If macro creation fails
        """
        macro_class = self.get_macro_class(name)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(custom_config=config)
        elif config is None:
            final_config = load_config()
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return macro_class(final_config)

    def list_macros(self) -> List[str]:
        """Get list of registered primary macro names."""
        return sorted(self._macros.keys())

    def get_aliases_for_macro(self, name: str) -> List[str]:
        """Get all aliases for a specific macro."""
        name = name.lstrip("@")
        return sorted(alias for alias, target in self._aliases.items() if target == name)

    def is_supported(self, name: str) -> bool:
        """Check if a macro name or alias is registered."""
        name = name.lstrip("@")
        return name in self._macros or name in self._aliases

    def get_macro_info(self, name: str) -> Dict[str, Any]:
        """
        Get information about a registered macro.

        Args:
            name: Macro name or alias

        Returns:
            Dict with macro information

        Raises:
            RegistryError: If name not found
        """
        primary = self.resolve_name(name)
        macro_class = self._macros[primary]

        return {
            "name": primary,
            "class": macro_class.__name__,
            "aliases": self.get_aliases_for_macro(primary),
            "module": macro_class.__module__,
            "description": (macro_class.__doc__ or "").strip().split("\n")[0],
        }


class MacroPlugin:
    """A set of macros the host registers in one call at startup."""

    def __init__(self, providing_macros: Sequence[Type[MemberMacro]]):
        self.providing_macros = list(providing_macros)

    def register(self, registry: MacroRegistry, replace: bool = False) -> None:
        """Register every provided macro under its name and aliases."""
        for macro_class in self.providing_macros:
            registry.register(
                macro_class.MACRO_NAME,
                macro_class,
                aliases=list(getattr(macro_class, "ALIASES", [])),
                replace=replace,
            )


# Global registry instance - created once
_global_registry: Optional[MacroRegistry] = None


def get_registry() -> MacroRegistry:
    """Get the global macro registry, registering the built-in plugin if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = MacroRegistry()
        _register_builtin_macros(_global_registry)
    return _global_registry


def _register_builtin_macros(registry: MacroRegistry):
    """Register the macros shipped with this package."""
    from .macros import PLUGIN

    PLUGIN.register(registry)


# Public API functions using the global registry


def register_macro(
    name: str,
    macro_class: Type[MemberMacro],
    aliases: Optional[List[str]] = None,
):
    """Register a macro in the global registry."""
    get_registry().register(name, macro_class, aliases)


def get_macro(
    name: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> MemberMacro:
    """Get macro instance from global registry."""
    return get_registry().create_macro(name, config)


def list_supported_macros() -> List[str]:
    """List all macros in the global registry."""
    return get_registry().list_macros()


def is_macro_supported(name: str) -> bool:
    """Check if a macro is registered in the global registry."""
    return get_registry().is_supported(name)


def get_macro_info(name: str) -> Dict[str, Any]:
    """Get information about a registered macro."""
    return get_registry().get_macro_info(name)
