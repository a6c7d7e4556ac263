# type: ignore
from invoke import task


@task
def venv(ctx):
    """Create the development environment with uv."""
    ctx.run("uv sync --all-extras")


@task
def lint(ctx):
    """
    Run ruff and mypy over the package and tests.
    """
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """
    Run tests with coverage information.
    """
    ctx.run("pytest --cov=scamp --cov-report=term-missing", pty=True)


@task
def sample(ctx, directory="captures"):
    """
    Capture raw system_profiler documents into a directory for `scamp scan -f`.
    """
    ctx.run(f"mkdir -p {directory}")
    for data_type, filename in (
        ("SPUSBDataType", "usb.json"),
        ("SPThunderboltDataType", "thunderbolt.json"),
        ("SPDisplaysDataType", "displays.json"),
        ("SPNetworkDataType", "network.json"),
    ):
        ctx.run(f"system_profiler {data_type} -json > {directory}/{filename}")


@task
def build_package(ctx):
    """
    Build package using uv.
    """
    ctx.run("rm -rf dist")
    ctx.run("uv build")
