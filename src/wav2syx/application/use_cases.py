"""Application use-cases orchestrating batch conversion."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent import futures
from pathlib import Path

from pydantic import ValidationError

from wav2syx.application.discovery import collect_files
from wav2syx.application.models import ConvertibleFile
from wav2syx.application.options import (
    DEFAULT_CHANNELS,
    DEFAULT_SAMPLE_RATE,
    FINAL_EXTENSION,
    INTERMEDIATE_EXTENSION,
    SOURCE_EXTENSION,
    ConversionOptions,
)
from wav2syx.application.ports import AudioConverter, ProgressReporter
from wav2syx.application.results import BatchReport, ItemResult, ItemStatus
from wav2syx.errors import (
    ConfigurationError,
    ConversionInvocationError,
    DestinationDirectoryCreationError,
    RenameError,
)
from wav2syx.logging_utils import new_run_logger
from wav2syx.schemas import BatchConversionConfig
from wav2syx.types import LogLike


def build_conversion_options(
    *,
    source_extension: str = SOURCE_EXTENSION,
    intermediate_extension: str = INTERMEDIATE_EXTENSION,
    final_extension: str = FINAL_EXTENSION,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    channels: int = DEFAULT_CHANNELS,
    jobs: int = 1,
) -> ConversionOptions:
    """Use-case helper: validate raw values and build typed options."""
    try:
        config = BatchConversionConfig(
            source_extension=source_extension,
            intermediate_extension=intermediate_extension,
            final_extension=final_extension,
            sample_rate=sample_rate,
            channels=channels,
            jobs=jobs,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid conversion parameters: {exc}") from exc
    return ConversionOptions(**config.model_dump())


def _fields(source: Path, destination: Path) -> dict[str, str]:
    return {"source": str(source), "destination": str(destination)}


def convert_file(
    item: ConvertibleFile,
    *,
    options: ConversionOptions,
    converter: AudioConverter,
    log: LogLike,
) -> ItemResult:
    """Use-case: convert one discovered file and relabel its output.

    Parameters
    ----------
    item : ConvertibleFile
        File to convert.
    options : ConversionOptions
        Extensions, sample rate, and channel count for the run.
    converter : AudioConverter
        External conversion capability.
    log : logging.Logger | logging.LoggerAdapter
        Run logger every outcome is reported through.

    Returns
    -------
    ItemResult
        Outcome of the attempt. Failures are reported, never raised.
    """
    source_path = item.source_path
    intermediate = item.destination_path(options.intermediate_extension)
    final = item.destination_path(options.final_extension)
    extra = _fields(source_path, intermediate)

    try:
        intermediate.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        error = DestinationDirectoryCreationError(
            intermediate.parent, source_path, str(exc)
        )
        log.error(str(error), extra=extra)
        return ItemResult(item, ItemStatus.DIRECTORY_FAILED, intermediate, str(error))

    try:
        run = converter.convert(
            source_path, options.sample_rate, options.channels, intermediate
        )
    except ConversionInvocationError as exc:
        log.error(str(exc), extra=extra)
        return ItemResult(item, ItemStatus.INVOCATION_FAILED, intermediate, str(exc))
    except Exception as exc:
        log.exception(
            "unexpected converter error %s => %s: %s",
            source_path,
            intermediate,
            exc,
            extra=extra,
        )
        return ItemResult(
            item, ItemStatus.INVOCATION_FAILED, intermediate, f"{type(exc).__name__}: {exc}"
        )

    returncode = run.returncode
    log.info("converted %s => %s", source_path, intermediate, extra=extra)
    if returncode:
        log.warning(
            "converter exited with status %s for %s: %s",
            returncode,
            source_path,
            (run.stderr or "").strip() or "<no output>",
            extra=extra,
        )

    try:
        intermediate.replace(final)
    except OSError as exc:
        error = RenameError(intermediate, final, str(exc))
        log.error(str(error), extra=_fields(source_path, final))
        return ItemResult(
            item, ItemStatus.RENAME_FAILED, intermediate, str(error), returncode
        )

    return ItemResult(item, ItemStatus.CONVERTED, final, None, returncode)


def convert_items(
    items: Iterable[ConvertibleFile],
    *,
    options: ConversionOptions,
    converter: AudioConverter,
    log: LogLike,
    on_result: ProgressReporter | None = None,
) -> tuple[ItemResult, ...]:
    """Convert items independently, in order, collecting every outcome."""

    def _one(item: ConvertibleFile) -> ItemResult:
        return convert_file(item, options=options, converter=converter, log=log)

    results: list[ItemResult] = []
    if options.jobs > 1:
        with futures.ThreadPoolExecutor(max_workers=options.jobs) as executor:
            outcomes = executor.map(_one, items)
            for result in outcomes:
                results.append(result)
                if on_result is not None:
                    on_result(result)
        return tuple(results)

    for item in items:
        result = _one(item)
        results.append(result)
        if on_result is not None:
            on_result(result)
    return tuple(results)


def convert_tree(
    *,
    source_root: Path,
    destination_root: Path,
    options: ConversionOptions | None = None,
    converter: AudioConverter | None = None,
    log: LogLike | None = None,
    on_result: ProgressReporter | None = None,
) -> BatchReport:
    """Use-case: mirror ``source_root`` into ``destination_root``, converting files.

    Discovery completes before the first conversion starts. No per-item error
    propagates out of this function.
    """
    options = options or ConversionOptions()
    if converter is None:
        from wav2syx.adapters.sox import SoxConverter

        converter = SoxConverter()
    run_log: LogLike = log or new_run_logger()

    items, discovery_errors = collect_files(
        Path(source_root),
        Path(destination_root),
        extension=options.source_extension,
        log=run_log,
    )
    run_log.debug(
        "discovered %d .%s file(s) under %s",
        len(items),
        options.source_extension,
        source_root,
    )

    results = convert_items(
        items,
        options=options,
        converter=converter,
        log=run_log,
        on_result=on_result,
    )
    return BatchReport(
        discovered=len(items),
        results=results,
        discovery_errors=discovery_errors,
    )
