"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or resolves one application status from the command line.
"""

import argparse
import asyncio

import uvicorn

from status_resolver.bootstrap import bootstrap_create_application, bootstrap_create_status_resolver
from status_resolver.config import AppSettings, config_load_settings
from status_resolver.domain import ApplicationStatus, ApplicationStatusResolved
from status_resolver.observability import observability_configure_logging


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when `resolve` ends unresolved.
    """

    argument_parser = argparse.ArgumentParser(description="Application status resolver runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "resolve"),
        help="Runtime command: `api` starts server, `resolve` resolves one application status and prints it",
        type=str,
    )
    argument_parser.add_argument(
        "application_id",
        nargs="?",
        default="123",
        help="Application id for `resolve`",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()
    settings = config_load_settings()

    if parsed_arguments.command == "resolve":
        application_status = asyncio.run(main_resolve_once(settings, parsed_arguments.application_id))
        print(application_status)
        if not isinstance(application_status, ApplicationStatusResolved):
            raise SystemExit(1)
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


async def main_resolve_once(settings: AppSettings, application_id: str) -> ApplicationStatus:
    """Resolve one application status and drain the losing lookup.

    Args:
        settings: Validated runtime settings.
        application_id: Application identifier.

    Returns:
        ApplicationStatus: Resolved or unresolved status.
    """

    observability_configure_logging(level=settings.log_level, log_format=settings.log_format)
    status_resolver = bootstrap_create_status_resolver(settings)
    application_status = await status_resolver.resolver_resolve(application_id.strip())
    await status_resolver.resolver_drain_detached(timeout_seconds=1.0)
    return application_status


if __name__ == "__main__":
    main()
