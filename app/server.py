import uvicorn

import click  # isort:skip

from app.config import dashboard_config


@click.command()
@click.option(
    "--port",
    default=dashboard_config.port,
    type=int,
    help="Port to run the dashboard API on",
)
@click.option(
    "--host",
    default=dashboard_config.host,
    help="Host to run the dashboard API on",
)
def main(port, host):
    """Launched with `dashboard-api` at root level"""
    uvicorn.run("app.main:app", port=port, host=host)


if __name__ == "__main__":
    main()
