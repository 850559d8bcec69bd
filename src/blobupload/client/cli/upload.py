"""Upload command for the blobupload CLI.

Commands:
- upload: Upload one or more files to blob storage
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
import httpx

from blobupload.client.api import BlobClient
from blobupload.client.cli.config import load_config
from blobupload.client.dispatcher import UploadResult, upload_file
from blobupload.client.retry import retry_with_backoff
from blobupload.client.urls import build_upload_url, content_disposition_header
from blobupload.core.config import DEFAULT_TIMEOUT_MS, UploadConfig
from blobupload.core.errors import UploadError
from blobupload.core.progress import ProgressEvent


class ConsoleProgress:
    """Progress observer rewriting a single console line per file."""

    def __init__(self, label: str) -> None:
        self._label = label

    def on_progress(self, event: ProgressEvent) -> None:
        end = "\n" if event.percent == 100 else ""
        click.echo(
            f"\r{self._label} ({event.total_bytes:,} bytes)...{event.percent}%{end}",
            nl=False,
        )


def parse_header(value: str) -> tuple[str, str]:
    """Parse a "Name: Value" header option."""
    name, sep, content = value.partition(":")
    if not sep or not name.strip():
        raise click.BadParameter(f"Expected NAME:VALUE, got {value!r}", param_hint="--header")
    return name.strip(), content.strip()


def resolve_url(
    path: Path,
    url: str | None,
    account: str | None,
    container: str | None,
    sas_token: str | None,
) -> str:
    """Return the upload URL for a file."""
    if url:
        return url
    if not (account and container and sas_token):
        raise click.UsageError(
            "Either --url or --account, --container and --sas-token "
            "(or their configured defaults) are required."
        )
    return build_upload_url(account, container, path.name, sas_token)


async def _upload_all(
    jobs: list[tuple[Path, str]],
    config: UploadConfig,
    headers: dict[str, str],
    content_disposition: bool,
    progress: bool,
    retries: int,
    concurrency: int,
) -> list[UploadResult | BaseException]:
    """Upload every job, waiting for all of them before the client closes.

    A failed file does not stop the others; its exception takes the place
    of its result.
    """
    semaphore = asyncio.Semaphore(concurrency)

    async with BlobClient(config) as client:

        async def upload_one(path: Path, url: str) -> UploadResult:
            file_headers = dict(headers)
            if content_disposition:
                file_headers.update(content_disposition_header(path.name))
            observer = ConsoleProgress(str(path)) if progress else None
            async with semaphore:
                return await retry_with_backoff(
                    lambda: upload_file(
                        path, url, headers=file_headers, observer=observer, client=client
                    ),
                    max_retries=retries,
                )

        return list(
            await asyncio.gather(
                *(upload_one(p, u) for p, u in jobs),
                return_exceptions=True,
            )
        )


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--url", help="Pre-authorized blob URL (single file only).")
@click.option("--account", help="Storage account name.")
@click.option("--container", help="Container name.")
@click.option("--sas-token", help="Shared access signature for the container.")
@click.option("--timeout-ms", type=click.IntRange(min=1), help="Per-request timeout in milliseconds.")
@click.option("--header", "-H", "header_values", multiple=True, help="Extra header NAME:VALUE for the final request.")
@click.option("--no-content-disposition", is_flag=True, help="Do not set the download filename header.")
@click.option("--insecure", is_flag=True, help="Skip TLS certificate verification.")
@click.option("--retries", type=click.IntRange(min=0), default=0, show_default=True, help="Whole-upload retries after network errors.")
@click.option("--concurrency", "-j", type=click.IntRange(min=1), default=1, show_default=True, help="Files uploaded at the same time.")
@click.option("--no-progress", is_flag=True, help="Disable progress output.")
def upload(
    files: tuple[Path, ...],
    url: str | None,
    account: str | None,
    container: str | None,
    sas_token: str | None,
    timeout_ms: int | None,
    header_values: tuple[str, ...],
    no_content_disposition: bool,
    insecure: bool,
    retries: int,
    concurrency: int,
    no_progress: bool,
) -> None:
    """Upload FILES to blob storage.

    Files up to 64 MB are sent in one request, larger files as 4 MB
    blocks committed at the end.
    """
    if url and len(files) > 1:
        raise click.UsageError("--url can only be used with a single file.")

    stored = load_config()
    account = account or stored.get("account")
    container = container or stored.get("container")
    sas_token = sas_token or stored.get("sas_token")
    if timeout_ms is None:
        timeout_ms = int(stored.get("timeout_ms", DEFAULT_TIMEOUT_MS))

    headers = dict(parse_header(value) for value in header_values)
    jobs = [(path, resolve_url(path, url, account, container, sas_token)) for path in files]
    config = UploadConfig(timeout_ms=timeout_ms, verify_ssl=not insecure)

    outcomes = asyncio.run(
        _upload_all(
            jobs,
            config,
            headers,
            content_disposition=not no_content_disposition,
            progress=not no_progress,
            retries=retries,
            concurrency=concurrency,
        )
    )

    failed = False
    for (path, _), outcome in zip(jobs, outcomes):
        if isinstance(outcome, UploadResult):
            click.echo(f"Uploaded {outcome.path} ({outcome.size:,} bytes)")
        elif isinstance(outcome, UploadError):
            click.echo(f"Error: {path}: {outcome}", err=True)
            failed = True
        elif isinstance(outcome, httpx.TransportError):
            click.echo(
                f"Error: {path}: network failure ({type(outcome).__name__}): {outcome}",
                err=True,
            )
            failed = True
        else:
            raise outcome

    if failed:
        sys.exit(1)
