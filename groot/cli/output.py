"""CLI output utilities and formatting."""

from colorama import Fore, Style

# ASCII art banner for Groot CLI
BANNER = f"""
{Fore.YELLOW}╔════════════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}                                                {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.GREEN}{Style.BRIGHT} ██████╗ ██████╗  ██████╗  ██████╗ ████████╗{Style.RESET_ALL} {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.GREEN}{Style.BRIGHT}██╔════╝ ██╔══██╗██╔═══██╗██╔═══██╗╚══██╔══╝{Style.RESET_ALL} {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.GREEN}{Style.BRIGHT}██║  ███╗██████╔╝██║   ██║██║   ██║   ██║   {Style.RESET_ALL} {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.GREEN}{Style.BRIGHT}██║   ██║██╔══██╗██║   ██║██║   ██║   ██║   {Style.RESET_ALL} {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.GREEN}{Style.BRIGHT}╚██████╔╝██║  ██║╚██████╔╝╚██████╔╝   ██║   {Style.RESET_ALL} {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.GREEN}{Style.BRIGHT} ╚═════╝ ╚═╝  ╚═╝ ╚═════╝  ╚═════╝    ╚═╝   {Style.RESET_ALL} {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}                                                {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.WHITE}{Style.BRIGHT}A tiny content-addressed version control{Style.RESET_ALL}      {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}                                                {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚════════════════════════════════════════════════╝{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def colored(text: str, fore: str, enabled: bool = True) -> str:
    """Wrap text in a colorama foreground color when enabled."""
    if not enabled:
        return text
    return f"{fore}{text}{Style.RESET_ALL}"
