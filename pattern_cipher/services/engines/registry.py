from typing import Type

from pattern_cipher.core.exceptions import ConfigurationError
from pattern_cipher.models.schemas import CipherScheme
from pattern_cipher.services.engines.base import SchemeStrategy
from pattern_cipher.services.engines.configuration import CipherConfiguration


class StrategyRegistry:
    """
    Registry for cipher scheme strategies.

    Maps each scheme tag to the strategy class implementing it. Only classes
    are stored; every engine builds its own strategy instance.
    """

    _strategies: dict[CipherScheme, Type[SchemeStrategy]] = {}

    @classmethod
    def register(cls, strategy_class: Type[SchemeStrategy]) -> Type[SchemeStrategy]:
        """
        Register a scheme strategy class.

        Can be used as a decorator:
            @StrategyRegistry.register
            class PatternKeyStrategy(SchemeStrategy):
                ...

        Args:
            strategy_class: The strategy class to register

        Returns:
            The strategy class (for decorator usage)
        """
        cls._strategies[strategy_class.scheme] = strategy_class
        return strategy_class

    @classmethod
    def create(cls, configuration: CipherConfiguration) -> SchemeStrategy:
        """
        Build the strategy selected by a configuration.

        Args:
            configuration: Validated cipher configuration

        Returns:
            Strategy instance bound to the configuration

        Raises:
            ConfigurationError: If no strategy is registered for the scheme
        """
        strategy_class = cls._strategies.get(configuration.scheme)
        if strategy_class is None:
            raise ConfigurationError(
                f"Cipher scheme '{configuration.scheme.value}' is not supported",
                {"scheme": configuration.scheme.value},
            )
        return strategy_class(configuration)

    @classmethod
    def list_registered(cls) -> list[CipherScheme]:
        """
        List all registered schemes.

        Returns:
            List of registered scheme tags
        """
        return list(cls._strategies.keys())


# Import strategies to trigger registration
def _load_strategies() -> None:
    """Load all strategy modules to trigger registration."""
    from pattern_cipher.services.engines import pattern_key, substitute_shift  # noqa: F401


# Load strategies when module is imported
_load_strategies()
