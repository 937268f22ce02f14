"""
Sample Click application documented by the tests.

Tree (names as invoked):

    app                      group, not runnable
    app config               group
    app config show          command, no long text, no examples
    app debug                hidden
    app legacy               deprecated
    app service              group
    app service restart      group with invoke_without_command
    app service restart now  command
    app service start        command with synopsis and examples
    app topics               help-topic placeholder (no callback)
"""

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--config", "-c", default="app.toml", help="Config file")
def app(verbose: bool, config: str) -> None:
    """Manage the sample application.

    The app command groups service and config management.
    """


@app.group()
def config() -> None:
    """Inspect configuration."""


@config.command()
def show() -> None:
    """Show the effective configuration."""


@app.command(hidden=True)
def debug() -> None:
    """Dump internal state."""


@app.command(deprecated=True)
def legacy() -> None:
    """Old entry point."""


@app.group()
def service() -> None:
    """Manage services."""


@service.group(invoke_without_command=True)
def restart() -> None:
    """Restart services."""


@restart.command()
@click.option("--force", is_flag=True, help="Skip graceful shutdown")
def now(force: bool) -> None:
    """Restart immediately."""


@service.command()
@click.argument("name")
@click.option("--wait", is_flag=True, help="Wait until the service is up")
@click.option("--timeout", "-t", type=int, default=30, help="Seconds to wait")
def start(name: str, wait: bool, timeout: int) -> None:
    """Start a service.

    Starts the named service in the background.

    \b
    Examples:
        # Start the web service
        app service start web

        # Start and wait for it
        app service start web --wait
    """


app.add_command(click.Command("topics", help="Environment variables understood by app."))
