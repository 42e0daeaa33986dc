import click
from colorama import Fore, Style


class Reporter:
    """Silent narration sink; the core modules talk only to this interface"""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def debug(self, message: str) -> None:
        pass


class ConsoleReporter(Reporter):
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def info(self, message: str) -> None:
        click.echo(f"{Fore.CYAN}{message}{Style.RESET_ALL}")

    def success(self, message: str) -> None:
        click.echo(f"{Fore.GREEN}{message}{Style.RESET_ALL}")

    def warn(self, message: str) -> None:
        click.echo(f"{Fore.YELLOW}{message}{Style.RESET_ALL}", err=True)

    def debug(self, message: str) -> None:
        if self.verbose:
            click.echo(f"{Style.DIM}{message}{Style.RESET_ALL}")


def ensure_reporter(reporter):
    return reporter if reporter is not None else Reporter()
