import logging
import sys
from argparse import Namespace

from hello_server.exceptions import ConfigurationError, ListenError
from hello_server.hello_server import HelloServer
from hello_server.utils.config import load_config, read_environment

logger: logging.Logger = logging.getLogger("hello_server")


def run_server() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    args: Namespace = HelloServer.parse_launch_arguments()

    config_data = load_config(read_environment(args.env_file))
    if isinstance(config_data, ConfigurationError):
        logger.critical("%s", config_data)
        sys.exit(1)

    server = HelloServer(config_data)
    server.finish_setup()

    try:
        server.start(args.host)

    except ListenError as err:
        logger.critical("%s", err)
        sys.exit(1)
