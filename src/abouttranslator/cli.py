"""CLI interface for abouttranslator using Typer."""

from __future__ import annotations

import dataclasses
import logging
import os
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.prompt import Prompt
from rich.table import Table

from abouttranslator import __version__
from abouttranslator.backends.base import TranslationBackend
from abouttranslator.config import (
    API_KEY_ENVVAR,
    DEFAULT_CONFIG_PATH,
    MODEL_PRESETS,
    AppConfig,
    load_config,
    save_config,
)
from abouttranslator.core.markers import marker_comment
from abouttranslator.i18n import LANGUAGE_CODES, UI_LANGUAGES, gettext
from abouttranslator.logging_setup import DEFAULT_LOG_FILE, logging_session
from abouttranslator.pipeline import BatchResult, Outcome, create_backend

_PREVIEW_WIDTH = 60


class BackendChoice(str, Enum):
    """Translation backend selection."""
    chat = "chat"
    dummy = "dummy"


app = typer.Typer(
    name="abouttranslator",
    help="Translate the <description> of about.xml mod files with an LLM chat API.",
    add_completion=False,
)
config_app = typer.Typer(help="Show or change persistent settings.")
app.add_typer(config_app, name="config")

console = Console()

_verbose = False
_quiet = False
_config_path: Path = DEFAULT_CONFIG_PATH
_log_file: Path | None = DEFAULT_LOG_FILE


def _print(msg: str, *, verbose_only: bool = False) -> None:
    """Print respecting --verbose/--quiet flags. Errors bypass --quiet."""
    if _quiet:
        return
    if verbose_only and not _verbose:
        return
    console.print(msg)


def _log_level() -> int:
    if _verbose:
        return logging.DEBUG
    if _quiet:
        return logging.WARNING
    return logging.INFO


def _logging():
    return logging_session(_log_file, level=_log_level(), console=console)


def _load_config() -> AppConfig:
    return load_config(_config_path)


def _save_config(cfg: AppConfig) -> None:
    save_config(cfg, _config_path)


def _override(cfg: AppConfig, **overrides: object) -> AppConfig:
    """Copy of *cfg* with every non-None override applied (not persisted)."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return dataclasses.replace(cfg, **changes)


def _make_backend(backend_name: str, cfg: AppConfig) -> tuple[TranslationBackend, str]:
    try:
        return create_backend(backend_name, cfg)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _print_summary(result: BatchResult, ui_language: str) -> None:
    def t(key: str) -> str:
        return gettext(key, ui_language)

    summary = Table(title=t("BatchSummary"))
    summary.add_column(t("Metric"), style="bold")
    summary.add_column(t("Count"), justify="right")
    summary.add_row(t("Success"), f"[green]{result.succeeded}[/green]")
    summary.add_row(t("Skipped"), f"[yellow]{result.skipped}[/yellow]")
    summary.add_row(t("Failed"), f"[red]{result.failed}[/red]")
    summary.add_row(t("Total"), str(result.total))
    console.print(summary)

    if result.errors:
        err_table = Table(title=t("Errors"))
        err_table.add_column(t("File"), style="red")
        err_table.add_column(t("Error"))
        for fname, err_msg in result.errors:
            err_table.add_row(fname, err_msg)
        console.print(err_table)


def _run_batch(
    directory: Path,
    backend: TranslationBackend,
    backend_label: str,
    cfg: AppConfig,
    *,
    delay: float | None = None,
    report: Path | None = None,
) -> BatchResult:
    """Run the batch driver with progress display, summary and optional report."""
    from abouttranslator.pipeline import batch_translate
    from abouttranslator.reporting.formatters import save_report
    from abouttranslator.reporting.report import BatchReport

    rpt = BatchReport(
        root_path=str(directory),
        target_lang=cfg.target_language,
        backend=backend_label,
        marker=marker_comment(cfg.translation_marker),
    )

    _print(f"Backend: [cyan]{backend_label}[/cyan]", verbose_only=True)

    with _logging(), backend, Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
        disable=_quiet,
    ) as progress:
        task = progress.add_task("Translating", total=None)

        def on_progress(index: int, total: int, _result: object) -> None:
            progress.update(task, total=total, completed=index)

        result = batch_translate(
            directory,
            backend=backend,
            config=cfg,
            delay=delay,
            on_progress=on_progress,
        )

    rpt.record(result)
    rpt.finish()

    if result.total == 0:
        console.print(
            f"[yellow]{gettext('NoFilesFound', cfg.ui_language)}[/yellow]"
        )
    else:
        _print(gettext("ProcessingFiles", cfg.ui_language, result.total))
        _print(f"Processed {result.total} files in {result.elapsed_seconds:.1f}s", verbose_only=True)
        _print(gettext("ProcessingComplete", cfg.ui_language))
        _print_summary(result, cfg.ui_language)

    if report:
        save_report(rpt, report)
        _print(f"Report saved: [cyan]{report}[/cyan]")

    return result


def version_callback(value: bool) -> None:
    if value:
        console.print(f"abouttranslator {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show debug output (previews, backend, timing).",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only show warnings and errors.",
    ),
    config: Path = typer.Option(
        DEFAULT_CONFIG_PATH, "--config", "-c",
        help="Path to the JSON settings file.",
    ),
    log_file: Path = typer.Option(
        DEFAULT_LOG_FILE, "--log-file",
        help="Log file, truncated at the start of every run.",
    ),
    no_log_file: bool = typer.Option(
        False, "--no-log-file", help="Do not write a log file.",
    ),
) -> None:
    """abouttranslator: Translate about.xml descriptions automatically."""
    global _verbose, _quiet, _config_path, _log_file
    _verbose = verbose
    _quiet = quiet
    _config_path = config
    _log_file = None if no_log_file else log_file


@app.command()
def batch(
    directory: Path = typer.Argument(
        ..., help="Root folder searched recursively for about.xml files.",
    ),
    lang: str | None = typer.Option(
        None, "--lang", "-l",
        help="Target language code (e.g. zh-CN, ja, fr). Defaults to the saved setting.",
    ),
    marker: str | None = typer.Option(
        None, "--marker",
        help="Translation marker comment written to translated files.",
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", "-k",
        envvar=API_KEY_ENVVAR, help="API key for the chat endpoint.",
    ),
    api_url: str | None = typer.Option(
        None, "--api-url", help="Chat-completions endpoint URL.",
    ),
    model: str | None = typer.Option(
        None, "--model", "-m", help="Model name sent to the endpoint.",
    ),
    backend_name: BackendChoice = typer.Option(
        BackendChoice.chat, "--backend", "-b",
        help="Backend: chat, dummy.",
    ),
    use_dummy: bool = typer.Option(
        False, "--dummy",
        help="Use dummy backend (shortcut for --backend dummy).",
    ),
    delay: float | None = typer.Option(
        None, "--delay",
        help="Seconds to wait after each API call. Defaults to the saved setting.",
    ),
    report: Path | None = typer.Option(
        None, "--report", "-r",
        help="Save report to file (json/md/csv).",
    ),
) -> None:
    """Translate every about.xml below a directory."""
    if not directory.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {directory}")
        raise typer.Exit(1)

    cfg = _load_config()
    cfg.last_selected_path = str(directory.resolve())
    _save_config(cfg)

    run_cfg = _override(
        cfg,
        target_language=lang,
        translation_marker=marker,
        api_key=api_key,
        api_url=api_url,
        model=model,
    )
    name = "dummy" if use_dummy else backend_name.value
    backend, backend_label = _make_backend(name, run_cfg)

    _print(f"Processing [cyan]{directory}[/cyan] → {run_cfg.target_language}")
    _run_batch(directory, backend, backend_label, run_cfg, delay=delay, report=report)


@app.command()
def translate(
    file: Path = typer.Argument(..., help="Path to a single about.xml file."),
    lang: str | None = typer.Option(
        None, "--lang", "-l", help="Target language code.",
    ),
    marker: str | None = typer.Option(
        None, "--marker", help="Translation marker comment.",
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", "-k", envvar=API_KEY_ENVVAR,
    ),
    api_url: str | None = typer.Option(None, "--api-url"),
    model: str | None = typer.Option(None, "--model", "-m"),
    backend_name: BackendChoice = typer.Option(
        BackendChoice.chat, "--backend", "-b",
        help="Backend: chat, dummy.",
    ),
    use_dummy: bool = typer.Option(False, "--dummy"),
) -> None:
    """Translate the description of one about.xml file."""
    from abouttranslator.pipeline import FilePipeline

    if not file.is_file():
        console.print(f"[red]Error:[/red] File not found: {file}")
        raise typer.Exit(1)

    run_cfg = _override(
        _load_config(),
        target_language=lang,
        translation_marker=marker,
        api_key=api_key,
        api_url=api_url,
        model=model,
    )
    name = "dummy" if use_dummy else backend_name.value
    backend, backend_label = _make_backend(name, run_cfg)
    _print(f"Backend: [cyan]{backend_label}[/cyan]", verbose_only=True)

    with _logging(), backend:
        result = FilePipeline(backend, run_cfg).process(file)

    if result.outcome == Outcome.SUCCEEDED:
        _print(f"[green]Translated:[/green] {file}")
    elif result.outcome == Outcome.SKIPPED:
        _print(f"[yellow]Skipped:[/yellow] {file} ({result.message})")
    else:
        console.print(f"[red]Failed:[/red] {file} ({result.message})")
        raise typer.Exit(1)


@app.command()
def scan(
    directory: Path = typer.Argument(..., help="Root folder to inspect."),
    marker: str | None = typer.Option(
        None, "--marker", help="Translation marker to look for.",
    ),
) -> None:
    """List about.xml files with their translation state (read-only)."""
    from abouttranslator.pipeline import scan_directory

    if not directory.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {directory}")
        raise typer.Exit(1)

    cfg = _load_config()
    with console.status("Scanning..."):
        entries = scan_directory(directory, marker or cfg.translation_marker)

    translated = sum(1 for e in entries if e.translated)
    console.print(
        f"Found [green]{len(entries)}[/green] about.xml files,"
        f" [cyan]{translated}[/cyan] already translated\n"
    )

    table = Table(title=f"about.xml files in {directory}")
    table.add_column("File", style="dim")
    table.add_column("Translated")
    table.add_column("Via", style="dim")
    table.add_column("Description")

    for entry in entries:
        if entry.error:
            table.add_row(str(entry.path), "[red]error[/red]", "", entry.error[:_PREVIEW_WIDTH])
            continue
        table.add_row(
            str(entry.path.relative_to(directory)),
            "[green]yes[/green]" if entry.translated else "no",
            entry.strategy.value if entry.strategy else "",
            entry.description[:_PREVIEW_WIDTH].replace("\n", " "),
        )

    console.print(table)


# ── config subcommands ──


def _config_table(cfg: AppConfig) -> Table:
    table = Table(title="Settings")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in cfg.to_dict().items():
        if key == "api_key":
            value = "********" if cfg.has_api_key else "(not set)"
        table.add_row(key, "" if value is None else str(value))
    return table


@config_app.command("show")
def config_show() -> None:
    """Show the current settings (the API key is masked)."""
    console.print(_config_table(_load_config()))
    console.print(f"[dim]{_config_path}[/dim]")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Setting name, e.g. target_language."),
    value: str = typer.Argument(..., help="New value."),
) -> None:
    """Change one setting and save it."""
    cfg = _load_config()
    try:
        cfg.set_value(key, value)
    except KeyError:
        console.print(f"[red]Error:[/red] Unknown setting: {key}")
        raise typer.Exit(1) from None
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid value for {key}: {e}")
        raise typer.Exit(1) from e
    _save_config(cfg)
    shown = "********" if key == "api_key" else value
    console.print(f"Set [cyan]{key}[/cyan] = {shown}")


@config_app.command("path")
def config_path() -> None:
    """Print the settings file location."""
    console.print(str(_config_path))


# ── interactive menu ──


def _show_config(cfg: AppConfig) -> None:
    def t(key: str) -> str:
        return gettext(key, cfg.ui_language)

    key_state = t("IsSet") if cfg.has_api_key else t("NotSet")
    console.print(t("CurrentConfig"))
    console.print(f"  {t('Model')}: {cfg.model}")
    console.print(f"  {t('ApiKey')}: {key_state}")
    console.print(f"  {t('ApiUrl')}: {cfg.api_url}")
    console.print(f"  {t('TargetLanguage')}: {cfg.target_language}")
    console.print(f"  {t('TranslationMarker')}: {cfg.translation_marker}", markup=False)
    console.print(f"  {t('UILanguage')}: {cfg.ui_language}")
    if cfg.last_selected_path:
        console.print(f"  {t('LastPath')}: {cfg.last_selected_path}")


def _menu_process(cfg: AppConfig) -> None:
    def t(key: str, *args: object) -> str:
        return gettext(key, cfg.ui_language, *args)

    console.print(f"\n{t('SelectFolder')}")
    console.print(f"1. {t('UseLastPath')}: {cfg.last_selected_path or t('NotSet')}")
    console.print(f"2. {t('EnterNewPath')}")
    choice = Prompt.ask(t("EnterChoice"), choices=["1", "2"], console=console)

    raw = cfg.last_selected_path if choice == "1" else Prompt.ask(t("EnterFolderPath"), console=console)
    if not raw or not Path(raw).is_dir():
        console.print(t("PathInvalid"))
        console.print(t("PathNotSelected"))
        return

    directory = Path(raw)
    cfg.last_selected_path = str(directory.resolve())
    _save_config(cfg)

    console.print(t("StartProcessing", directory))
    # Environment key wins for this run only, as with batch --api-key
    run_cfg = _override(cfg, api_key=os.environ.get(API_KEY_ENVVAR) or None)
    try:
        backend, backend_label = create_backend("chat", run_cfg)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        return
    _run_batch(directory, backend, backend_label, run_cfg)


def _menu_settings(cfg: AppConfig) -> None:
    def t(key: str, *args: object) -> str:
        return gettext(key, cfg.ui_language, *args)

    console.print(t("ConfigSettingsTitle"))
    while True:
        key_state = t("IsSet") if cfg.has_api_key else t("NotSet")
        console.print(f"\n{t('CurrentConfig')}")
        console.print(f"1. {t('ApiKey')}: {key_state}")
        console.print(f"2. {t('Model')}: {cfg.model}")
        console.print(f"3. {t('ApiUrl')}: {cfg.api_url}")
        console.print(f"4. {t('TargetLanguage')}: {cfg.target_language}")
        console.print(f"5. {t('TranslationMarker')}: {cfg.translation_marker}", markup=False)
        console.print(f"6. {t('UILanguage')}: {cfg.ui_language}")
        console.print(f"7. {t('ReturnMainMenu')}")

        choice = Prompt.ask(
            t("EnterOption"), choices=[str(i) for i in range(1, 8)], console=console,
        )

        if choice == "1":
            new_key = Prompt.ask(t("EnterApiKey"), password=True, default="", console=console)
            if new_key:
                cfg.api_key = new_key
                console.print(t("ApiKeyUpdated"))
        elif choice == "2":
            console.print(f"\n{t('SelectModel')}")
            for i, (_label, model_id) in enumerate(MODEL_PRESETS, start=1):
                console.print(f"{i}. {model_id}")
            picked = Prompt.ask(
                t("EnterChoice"),
                choices=[str(i) for i in range(1, len(MODEL_PRESETS) + 1)],
                console=console,
            )
            label, cfg.model = MODEL_PRESETS[int(picked) - 1]
            console.print(t("ModelSwitched", label))
        elif choice == "3":
            new_url = Prompt.ask(t("EnterApiUrl"), default=cfg.api_url, console=console)
            if new_url:
                cfg.api_url = new_url
                console.print(t("ApiUrlUpdated"))
        elif choice == "4":
            console.print(f"\n{t('LanguageCodes')}")
            for code, name in LANGUAGE_CODES:
                console.print(f"  {code} - {name}")
            new_lang = Prompt.ask(
                t("EnterTargetLanguage"), default=cfg.target_language, console=console,
            )
            if new_lang:
                cfg.target_language = new_lang
                console.print(t("TargetLanguageUpdated"))
        elif choice == "5":
            new_marker = Prompt.ask(
                t("EnterTranslationMarker"), default=cfg.translation_marker, console=console,
            )
            if new_marker:
                cfg.translation_marker = new_marker
                console.print(t("TranslationMarkerUpdated"))
        elif choice == "6":
            console.print(f"\n{t('SelectUILanguage')}")
            for i, (_code, name) in enumerate(UI_LANGUAGES, start=1):
                console.print(f"{i}. {name}")
            picked = Prompt.ask(
                t("EnterChoice"),
                choices=[str(i) for i in range(1, len(UI_LANGUAGES) + 1)],
                console=console,
            )
            cfg.ui_language = UI_LANGUAGES[int(picked) - 1][0]
            console.print(t("UILanguageUpdated"))
        else:
            _save_config(cfg)
            console.print(t("ConfigSaved"))
            return


@app.command()
def menu() -> None:
    """Interactive menu: process a folder or change settings."""
    cfg = _load_config()
    console.print(f"[bold]{gettext('AppTitle', cfg.ui_language)}[/bold]")
    console.print("=====================")
    _show_config(cfg)

    while True:
        def t(key: str) -> str:
            return gettext(key, cfg.ui_language)

        console.print(f"\n{t('SelectOperation')}")
        console.print(f"1. {t('SelectPath')}")
        console.print(f"2. {t('ConfigSettings')}")
        console.print(f"3. {t('Exit')}")
        choice = Prompt.ask(t("EnterChoice"), choices=["1", "2", "3"], console=console)

        if choice == "1":
            _menu_process(cfg)
        elif choice == "2":
            _menu_settings(cfg)
        else:
            console.print(t("Exit"))
            return


if __name__ == "__main__":
    app()
