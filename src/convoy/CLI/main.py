"""
Command Line Interface for convoy-build.
"""
import logging
import sys
import click
from ..errors import ConfigurationError, ConvoyError
from ..MANAGERS.build_orchestrator import BuildOrchestrator
from ..MANAGERS.environment_manager import EnvironmentManager
from ..MODELS.build_config import CONSUL_LOCATION_ENV, DEFAULT_ENVOY_VERSION

logger = logging.getLogger("convoy")


def _configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(format="%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
    logger.setLevel(level)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option('--consul-location', '-c', default=None,
              help=f'absolute filepath of consul source code on your system, '
                   f'takes precedence over the {CONSUL_LOCATION_ENV} env var')
@click.option('--envoy-version', '-e', default=None,
              help=f'version of envoy to use, defaults to {DEFAULT_ENVOY_VERSION}')
@click.option('--env-file', default=None, type=click.Path(dir_okay=False),
              help=f'.env file to read {CONSUL_LOCATION_ENV} from')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, consul_location, envoy_version, env_file, verbose):
    """
    Build the convoy image: consul from a local checkout bundled with envoy.
    """
    _configure_logging(verbose)

    try:
        config = EnvironmentManager(env_file=env_file).resolve(consul_location, envoy_version)
    except ConfigurationError as e:
        logger.critical(str(e))
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)

    try:
        tag = BuildOrchestrator(config).run()
    except ConvoyError as e:
        logger.critical(str(e))
        ctx.exit(1)

    logger.info('successfully built convoy image, it is available as "%s"', tag)


def main():
    """
    Main entry point for the CLI.
    """
    cli(args=sys.argv[1:], prog_name="convoy-build")


if __name__ == '__main__':
    main()
