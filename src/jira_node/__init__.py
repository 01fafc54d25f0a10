import json
import logging
import os
import sys
from typing import Any

import click
from dotenv import load_dotenv

from jira_node.utils.logging import LOGGER_NAME, setup_logging

__version__ = "0.1.0"

# Only main() installs handlers
logger = logging.getLogger(LOGGER_NAME)


def _read_json(path: str | None, param_hint: str) -> Any:
    if path is None:
        return None
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise click.BadParameter(
            f"{path} is not valid JSON: {e}", param_hint=param_hint
        ) from e


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--parameters",
    "parameters_file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with the node parameters (resource, operation, ...)",
)
@click.option(
    "--input",
    "input_file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with the input records; their keys override the parameters",
)
@click.option(
    "--load-options",
    help="Run an option loader (e.g. getProjects) instead of the operation",
)
def main(
    verbose: int,
    env_file: str | None,
    parameters_file: str | None,
    input_file: str | None,
    load_options: str | None,
) -> None:
    """Jira Node - run Jira Software operations over a batch of records

    Credentials are read from the environment: JIRA_URL, JIRA_EMAIL and
    JIRA_API_TOKEN (Cloud) or JIRA_PASSWORD (Server). JIRA_VERSION picks
    the deployment; by default it follows the URL.
    """
    from .exceptions import JiraNodeError
    from .host import StaticParameterProvider
    from .jira import JiraConfig, JiraNode
    from .jira.constants import CREDENTIALS_BY_VERSION

    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    elif os.getenv("JIRA_NODE_VERY_VERBOSE", "false").lower() in ("true", "1", "yes"):
        current_logging_level = logging.DEBUG
    elif os.getenv("JIRA_NODE_VERBOSE", "false").lower() in ("true", "1", "yes"):
        current_logging_level = logging.INFO
    else:
        current_logging_level = logging.WARNING

    setup_logging(current_logging_level)

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    parameters = _read_json(parameters_file, "--parameters") or {}
    if not isinstance(parameters, dict):
        raise click.BadParameter("must hold a JSON object", param_hint="--parameters")
    items = _read_json(input_file, "--input")
    if items is None:
        items = [{}]
    elif isinstance(items, dict):
        items = [items]
    elif not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise click.BadParameter("must hold a list of JSON objects", param_hint="--input")

    try:
        config = JiraConfig.from_env()
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    parameters.setdefault("jiraVersion", config.version)
    provider = StaticParameterProvider(
        parameters=parameters,
        items=items,
        credentials={CREDENTIALS_BY_VERSION[config.version]: config.to_credentials()},
    )

    try:
        node = JiraNode(provider, config=config)
        if load_options:
            output: list[Any] = [
                option.model_dump() for option in node.load_options(load_options)
            ]
        else:
            output = node.execute()
    except JiraNodeError as e:
        logger.debug("Run failed", exc_info=True)
        click.echo(str(e), err=True)
        sys.exit(1)

    click.echo(json.dumps(output, indent=2))


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
