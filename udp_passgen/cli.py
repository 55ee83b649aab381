#!/usr/bin/env python3
"""
Command-line interface for the UDP password generator.
"""

import argparse
import sys
from typing import List, Optional

from udp_passgen.core.client import PasswordClient
from udp_passgen.core.generator import (
    PasswordGenerator,
    StandardRandomSource,
    SystemRandomSource,
)
from udp_passgen.core.server import PasswordServer
from udp_passgen.core.transport import UDPTransport, resolve_address
from udp_passgen.core.validator import (
    DEFAULT_PASSWORD_LENGTH,
    is_stop_request,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
)
from udp_passgen.utils.config import Config
from udp_passgen.utils.logger import Logger
from udp_passgen.utils.exceptions import (
    PassgenError,
    ValidationFailure,
    MalformedMessage,
)


MENU_TEXT = (
    f"Enter the password type and its length (between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}):\n"
    "  n: numeric password (digits only)\n"
    "  a: alphabetic password (lowercase letters only)\n"
    "  m: mixed password (lowercase letters and digits)\n"
    "  s: secure password (uppercase, lowercase, digits and symbols)\n"
    "  u: unambiguous secure password (no look-alike characters)\n"
    "  h: help\n"
    "  q: quit\n"
)

HELP_TEXT = (
    "\nPassword Generator Help\n"
    "Commands:\n"
    " h        : show this help\n"
    " n LENGTH : numeric password (digits only)\n"
    " a LENGTH : alphabetic password (lowercase letters only)\n"
    " m LENGTH : mixed password (lowercase letters and digits)\n"
    " s LENGTH : secure password (uppercase, lowercase, digits, symbols)\n"
    " u LENGTH : unambiguous secure password (no look-alike characters)\n"
    " q        : quit\n\n"
    f" LENGTH must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}\n\n"
    " Ambiguous characters left out by 'u':\n"
    " 0 O o (zero and letter O)\n"
    " 1 l I i (one and letters l, I)\n"
    " 2 Z z (two and letter Z)\n"
    " 5 S s (five and letter S)\n"
    " 8 B (eight and letter B)\n"
    "\nWhen LENGTH is omitted the default length is used (8 unless configured).\n"
)


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    # Options shared by both commands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--host", help="Server address (default from config: 127.0.0.1)")
    common.add_argument("--port", type=int, help="Server UDP port (default from config: 8080)")
    common.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level",
    )
    common.add_argument("--log-file", help="Save log output to this file")
    common.add_argument("--config", help="Path to configuration file")
    common.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    parser = argparse.ArgumentParser(
        description="UDP Password Generator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    server_parser = subparsers.add_parser(
        "server", parents=[common], help="Serve password requests"
    )
    server_parser.add_argument(
        "--secure-random",
        action="store_true",
        default=None,
        help="Draw passwords from the operating system's CSPRNG",
    )
    server_parser.add_argument(
        "--no-strict",
        dest="strict",
        action="store_false",
        default=None,
        help="Do not re-validate requests; unknown types fall back to numeric",
    )
    server_parser.add_argument(
        "--seed", type=int, help="Seed the non-cryptographic random source"
    )

    client_parser = subparsers.add_parser(
        "client", parents=[common], help="Request passwords from a server"
    )
    client_parser.add_argument(
        "type", nargs="?", help="Password type (n, a, m, s, u); omit for interactive mode"
    )
    client_parser.add_argument("length", nargs="?", help="Password length")
    client_parser.add_argument(
        "-n", "--count", type=int, default=1, help="Number of passwords to request"
    )
    client_parser.add_argument(
        "--timeout", type=float, help="Seconds to wait for each response"
    )

    return parser


def setup_logger(args, config: Config) -> Logger:
    """Set up logging based on command-line arguments and config"""
    # Command-line args override config
    verbosity = args.verbosity or config.get("verbosity", "info")
    log_file = args.log_file or config.get("log_file")

    return Logger(name="udp_passgen", log_file=log_file, level=verbosity)


def apply_args_to_config(args, config: Config) -> None:
    """Overlay command-line arguments on the loaded configuration"""
    for key in ("host", "port", "verbosity", "log_file"):
        value = getattr(args, key, None)
        if value is not None:
            config.set(key, value)
    if args.command == "server":
        if args.secure_random is not None:
            config.set("secure_random", args.secure_random)
        if args.strict is not None:
            config.set("strict", args.strict)
    elif args.timeout is not None:
        config.set("timeout", args.timeout)


def run_server(args, config: Config, log: Logger) -> int:
    """Bind the server socket and answer requests until interrupted"""
    logger = log.get_logger()
    if config.get("secure_random"):
        if args.seed is not None:
            logger.warning("--seed is ignored with the secure random source")
        random_source = SystemRandomSource()
    else:
        random_source = StandardRandomSource(args.seed)

    bind_address = (config.get("host"), config.get("port"))
    with UDPTransport(bind_address=bind_address) as transport:
        logger.info(f"Bound to {bind_address[0]}:{bind_address[1]}")
        server = PasswordServer(
            transport,
            generator=PasswordGenerator(random_source),
            strict=config.get("strict", True),
            logger=log.component("server"),
        )
        server.serve_forever()
    return 0


def interactive_session(client: PasswordClient, stdin=None, stdout=None) -> int:
    """Prompt for requests until the user quits

    Args:
        client: Client used for each request
        stdin: Input stream (default: sys.stdin)
        stdout: Output stream (default: sys.stdout)

    Returns:
        Exit code
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        stdout.write(MENU_TEXT + "? ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            # EOF behaves like 'q'
            break

        fields = line.split()
        if fields and fields[0].lower() == "h":
            stdout.write(HELP_TEXT + "\n")
            continue
        if fields and is_stop_request(fields[0]):
            break
        if not 1 <= len(fields) <= 2:
            stdout.write("Invalid input. Please provide a valid type and length.\n\n")
            continue

        try:
            response = client.request_password(*fields)
        except (ValidationFailure, MalformedMessage) as e:
            stdout.write(f"{e}\n\n")
            continue
        stdout.write(f"Password generated: {response.password}\n\n")

    return 0


def run_client(args, config: Config, log: Logger) -> int:
    """Send one-shot requests, or start the interactive prompt"""
    logger = log.get_logger()
    server_address = resolve_address(config.get("host"), config.get("port"))
    logger.debug(f"Server resolved to {server_address[0]}:{server_address[1]}")

    with UDPTransport(timeout=config.get("timeout")) as transport:
        client = PasswordClient(
            transport,
            server_address,
            default_length=config.get("default_length", DEFAULT_PASSWORD_LENGTH),
            logger=log.component("client"),
        )

        if args.type is None:
            return interactive_session(client)

        if args.count < 1:
            raise ValidationFailure("Count must be at least 1")
        for password in client.request_passwords(args.type, args.length, args.count):
            print(password)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the password generator CLI

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        display_examples()
        return 1

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except PassgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log = setup_logger(args, config)
    logger = log.get_logger()

    try:
        apply_args_to_config(args, config)

        if args.save_config:
            config.save()
            logger.info(f"Configuration saved to {config.config_path}")

        if args.command == "server":
            return run_server(args, config, log)
        return run_client(args, config, log)

    except PassgenError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1


def display_examples():
    """Display usage examples"""
    examples = [
        "Start a server on the default address (127.0.0.1:8080):",
        "  udp-passgen server",
        "",
        "Serve on all interfaces with the operating system's CSPRNG:",
        "  udp-passgen server --host 0.0.0.0 --secure-random",
        "",
        "Interactive client:",
        "  udp-passgen client",
        "",
        "Request a 16-character secure password:",
        "  udp-passgen client s 16",
        "",
        "Request five unambiguous passwords of the default length:",
        "  udp-passgen client u -n 5",
        "",
        "Talk to a remote server and remember it:",
        "  udp-passgen client --host passwdgen.example.org --save-config",
        "",
        "For more options:",
        "  udp-passgen -h",
    ]

    print("\n".join(examples))


if __name__ == "__main__":
    sys.exit(main())
