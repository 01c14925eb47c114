"""
Command line entry point.

    native-helper check-ndk r10e --minimum 7
    native-helper check-ndk --ndk-dir /opt/android-ndk
    native-helper scan project.json target/unpacked-libs --arch x86
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from nativehelper.application.scanner import NativeDependencyScanner
from nativehelper.console import print_error, print_native_dependencies, print_success
from nativehelper.domain.exceptions import ConfigurationError, InvalidVersion
from nativehelper.domain.models import NDK_ARCHITECTURES, Architecture
from nativehelper.domain.version import validate_ndk_version
from nativehelper.infrastructure.config import load_project
from nativehelper.infrastructure.filesystem import FilesystemPackageInspector
from nativehelper.infrastructure.ndk import check_ndk
from nativehelper.logging_setup import setup_logging

logger = logging.getLogger(__name__)

ABI_CHOICE = click.Choice(NDK_ARCHITECTURES)


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose (DEBUG) logging to console",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(),
    help="Path to log file",
)
def main(verbose: bool, log_file: str | None) -> None:
    """Native library helper for Android builds."""
    setup_logging(verbose=verbose, log_file=log_file)


@main.command("check-ndk")
@click.argument("version", required=False)
@click.option(
    "--ndk-dir",
    default=None,
    type=click.Path(exists=True, file_okay=False),
    help="Read the version from an installed NDK instead",
)
@click.option(
    "--minimum",
    default=7,
    type=int,
    help="Minimum major NDK revision (default: 7)",
)
def check_ndk_command(version: str | None, ndk_dir: str | None, minimum: int) -> None:
    """Check that an NDK revision meets the minimum."""
    try:
        if version is not None and ndk_dir is not None:
            raise click.UsageError("Pass a VERSION or --ndk-dir, not both")
        if version is not None:
            parsed = validate_ndk_version(minimum, version)
        elif ndk_dir is not None:
            parsed = check_ndk(Path(ndk_dir), minimum)
        else:
            raise click.UsageError("Pass a VERSION or --ndk-dir")
    except (ConfigurationError, InvalidVersion) as e:
        logger.error("NDK check failed: %s", e)
        print_error(str(e), f"An NDK of revision r{minimum} or newer is required.")
        sys.exit(1)

    print_success(f"NDK {parsed} is supported")


@main.command("scan")
@click.argument("project_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("unpack_dir", type=click.Path(file_okay=False))
@click.option(
    "--static",
    "static_libraries",
    is_flag=True,
    help="Select static archives (.a) instead of shared objects (.so)",
)
@click.option(
    "--no-recurse",
    is_flag=True,
    help="Only look at the top level of package payload directories",
)
@click.option("--arch", default=None, type=ABI_CHOICE, help="Restrict to one ABI")
@click.option(
    "--default-arch",
    default=Architecture.ARMEABI.value,
    type=ABI_CHOICE,
    help="ABI assumed for unclassified artifacts (default: armeabi)",
)
def scan_command(
    project_file: str,
    unpack_dir: str,
    static_libraries: bool,
    no_recurse: bool,
    arch: str | None,
    default_arch: str,
) -> None:
    """List the native dependencies of a project."""
    try:
        project = load_project(Path(project_file))
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        print_error(str(e), "Check that the project file is valid JSON.")
        sys.exit(1)

    default_architecture = Architecture.from_name(default_arch)
    scanner = NativeDependencyScanner(project, FilesystemPackageInspector())
    native = scanner.collect_native_dependencies(
        Path(unpack_dir),
        recurse=not no_recurse,
        shared_libraries=not static_libraries,
        architecture=Architecture.from_name(arch) if arch else None,
        default_architecture=default_architecture,
    )
    print_native_dependencies(native, default_architecture)


if __name__ == "__main__":
    main()
