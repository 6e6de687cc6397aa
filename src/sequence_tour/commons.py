import click
import time
import dataclasses


@dataclasses.dataclass(init=True, repr=True, frozen=True)
class _Config():
    """Global configuration object for the CLI"""
    show_debug: bool

    # static global config instance
    _instance: '_Config' = None


def get_config():
    if _Config._instance is None:
        _Config._instance = _Config(False)
    return _Config._instance


def set_config(show_debug):
    _Config._instance = _Config(show_debug)
    return _Config._instance


def _now():
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


# diagnostics go to stderr so the tour output on stdout keeps its fixed format
def debug(message):
    if get_config().show_debug:
        click.echo(click.style(f"{_now()} D {message}", fg='magenta'), err=True)


def error(message):
    click.echo(click.style(f"{_now()} E {message}", fg='red'), err=True)


def info(message):
    click.echo(click.style(f"{_now()} I {message}", fg='blue'), err=True)


def warn(message):
    click.echo(click.style(f"{_now()} W {message}", fg='yellow'), err=True)
