"""
Managers for resolving build configuration from flags, the environment and .env files.
"""
import logging
import os
from typing import Dict, Mapping, Optional
from dotenv import dotenv_values
from ..errors import ConfigurationError
from ..MODELS.build_config import BuildConfig, CONSUL_LOCATION_ENV

logger = logging.getLogger(__name__)


class EnvironmentManager:
    """
    Resolves configuration values, letting explicit flags override the environment.
    """
    def __init__(self,
                 environ: Optional[Mapping[str, str]] = None,
                 env_file: Optional[str] = None):
        """
        Initializes the environment manager.

        :param environ: Environment to read from. Defaults to the process environment.
        :param env_file: Optional path to a .env file consulted before the environment.
        """
        self.environ = os.environ if environ is None else environ
        self.env_file = env_file

    def get_merged_environment(self) -> Dict[str, str]:
        """
        Merges the .env file (if any) with the environment.
        Variables set in the environment override the file.
        """
        merged: Dict[str, str] = {}
        if self.env_file:
            if not os.path.exists(self.env_file):
                raise ConfigurationError(f"env file {self.env_file} does not exist")
            try:
                values = dotenv_values(self.env_file)
            except OSError as e:
                raise ConfigurationError(f"could not read env file {self.env_file}: {e}") from e
            merged.update({k: v for k, v in values.items() if v is not None})
        merged.update(self.environ)
        return merged

    def resolve_consul_location(self, flag_value: Optional[str]) -> str:
        """
        Returns the consul source location.

        :param flag_value: Value given on the command line, if any. Wins when non-empty.
        :raises ConfigurationError: If neither the flag nor the environment supplies a value.
        """
        if flag_value:
            return flag_value

        location = self.get_merged_environment().get(CONSUL_LOCATION_ENV, "")
        if not location:
            raise ConfigurationError("consul location must be supplied")

        logger.debug("using consul location from %s", CONSUL_LOCATION_ENV)
        return location

    def resolve(self,
                consul_location: Optional[str] = None,
                envoy_version: Optional[str] = None) -> BuildConfig:
        """
        Builds a validated BuildConfig from command line values and the environment.
        """
        return BuildConfig(
            consul_location=self.resolve_consul_location(consul_location),
            envoy_version=envoy_version or "",
        )
