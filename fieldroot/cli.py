"""
Command-line interface for FieldRoot.

Provides commands for:
- Translating Chinese field names into English identifiers
- Managing the custom word-root library (add, edit, delete, clear)
- Bulk-importing roots from CSV with a preview
- Showing where roots are stored

Usage:
    fieldroot translate 交易日期 存款金额
    fieldroot translate --input fields.txt --segments
    fieldroot roots list --search 交易
    fieldroot roots add 证券 sec
    fieldroot roots import roots.csv
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fieldroot import __version__
from fieldroot import config
from fieldroot.dictionary.importer import preview_import_file
from fieldroot.dictionary.store import DictionaryStore
from fieldroot.errors import FieldRootError
from fieldroot.models import ImportAction
from fieldroot.pipeline import rows_from_text
from fieldroot.segmenter import join_segments, segment, unknown_characters

app = typer.Typer(
    name="fieldroot",
    help="FieldRoot: translate Chinese field names into English identifiers by word roots",
    add_completion=False,
)
roots_app = typer.Typer(help="Manage the custom word-root library.")
app.add_typer(roots_app, name="roots")
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"FieldRoot v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="Log dictionary and storage activity",
    ),
):
    """FieldRoot: word-root based field name translation."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _store(no_base: bool = False) -> DictionaryStore:
    return config.default_store(use_base=not no_base)


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/] {escape(str(error))}", style="bold")
    raise typer.Exit(1)


def _render_segments(segments) -> str:
    parts = []
    for seg in segments:
        if seg.matched:
            parts.append(f"[cyan]{escape(seg.text)}[/][dim]({escape(seg.english)})[/]")
        else:
            parts.append(f"[red]{escape(seg.text)}[/]")
    return " ".join(parts)


@app.command()
def translate(
    fields: Optional[List[str]] = typer.Argument(
        None,
        help="Chinese field names to translate",
    ),
    input_file: Optional[Path] = typer.Option(
        None, "--input", "-i",
        help="Text file with one field name per line",
    ),
    separator: str = typer.Option(
        config.SEPARATOR, "--separator",
        help="Separator between English tokens",
    ),
    show_segments: bool = typer.Option(
        False, "--segments",
        help="Show how each field was segmented",
    ),
    no_base: bool = typer.Option(
        False, "--no-base",
        help="Ignore the built-in roots",
    ),
):
    """Translate field names into English identifiers."""
    text = "\n".join(fields or [])
    if input_file:
        if not input_file.exists():
            console.print(f"[red]Error:[/] File not found: {input_file}", style="bold")
            raise typer.Exit(1)
        try:
            text = "\n".join([text, input_file.read_text(encoding="utf-8-sig")])
        except UnicodeDecodeError:
            console.print(f"[red]Error:[/] Not valid UTF-8 text: {escape(str(input_file))}", style="bold")
            raise typer.Exit(1)

    rows = rows_from_text(text)
    if not rows:
        console.print("[red]Error:[/] Provide field names as arguments or with --input", style="bold")
        raise typer.Exit(1)

    dictionary = _store(no_base).effective_dictionary()

    table = Table(title=f"Translated {len(rows)} fields")
    table.add_column("中文字段名", style="cyan")
    table.add_column("英文字段名", style="green")
    if show_segments:
        table.add_column("分词")

    unknown: dict[str, None] = {}
    for row in rows:
        segments = segment(row.chinese, dictionary)
        cells = [escape(row.chinese), escape(join_segments(segments, separator))]
        if show_segments:
            cells.append(_render_segments(segments))
        table.add_row(*cells)
        for char in unknown_characters(segments):
            unknown.setdefault(char, None)

    console.print(table)

    if unknown:
        console.print(f"\n[yellow]Unmatched characters:[/] {escape(' '.join(unknown))}")
        console.print("[dim]Add roots with: fieldroot roots add <中文> <english>[/]")


@roots_app.command("list")
def list_roots(
    search: Optional[str] = typer.Option(
        None, "--search", "-s",
        help="Only roots whose Chinese or English contains this text",
    ),
):
    """List custom word roots."""
    store = _store()
    roots = store.search(search or "")

    table = Table(title="Custom word roots")
    table.add_column("中文词根", style="cyan")
    table.add_column("英文对应", style="green")
    for root in roots:
        table.add_row(escape(root.chinese), escape(root.english))

    console.print(table)
    console.print(f"[dim]共 {len(roots)} 个词根[/]")


@roots_app.command("add")
def add_root(
    chinese: str = typer.Argument(..., help="Chinese phrase"),
    english: str = typer.Argument(..., help="English token"),
):
    """Add a custom root, or overwrite an existing one."""
    store = _store()
    try:
        store.add(chinese, english)
    except FieldRootError as e:
        _fail(e)
    console.print(f"[green]Saved:[/] {escape(chinese.strip())} → {escape(english.strip())}")


@roots_app.command("edit")
def edit_root(
    old_chinese: str = typer.Argument(..., help="Existing Chinese phrase"),
    new_chinese: str = typer.Argument(..., help="New Chinese phrase"),
    new_english: str = typer.Argument(..., help="New English token"),
):
    """Rename and/or retranslate a custom root."""
    store = _store()
    try:
        store.edit(old_chinese, new_chinese, new_english)
    except FieldRootError as e:
        _fail(e)
    console.print(
        f"[green]Updated:[/] {escape(old_chinese)} → "
        f"{escape(new_chinese.strip())} ({escape(new_english.strip())})"
    )


@roots_app.command("delete")
def delete_root(
    chinese: str = typer.Argument(..., help="Chinese phrase to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Delete a custom root."""
    store = _store()
    if chinese not in store:
        console.print(f"[yellow]Root not found:[/] {escape(chinese)}")
        return
    if not yes and not typer.confirm(f'确定要删除词根 "{chinese}" 吗？'):
        raise typer.Exit(0)
    store.delete(chinese)
    console.print(f"[green]Deleted:[/] {escape(chinese)}")


@roots_app.command("clear")
def clear_roots(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Delete every custom root. Built-in roots are kept."""
    store = _store()
    if not yes and not typer.confirm("确定要清空所有词根吗？此操作不可恢复。"):
        raise typer.Exit(0)
    count = store.count
    store.clear_all()
    console.print(f"[green]Cleared {count} custom roots[/]")


@roots_app.command("import")
def import_roots(
    csv_file: Path = typer.Argument(..., help="CSV file with 中文全称/中文 and 英文缩写/英文 columns"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Import without confirmation"),
):
    """Bulk-import roots from a CSV file after a preview."""
    if not csv_file.exists():
        console.print(f"[red]Error:[/] File not found: {csv_file}", style="bold")
        raise typer.Exit(1)

    store = _store()
    try:
        preview = preview_import_file(csv_file, store.effective_dictionary())
    except FieldRootError as e:
        _fail(e)

    table = Table(title=f"发现 {len(preview)} 个词根")
    table.add_column("中文", style="cyan")
    table.add_column("英文", style="green")
    table.add_column("操作")
    for row in preview:
        style = "green" if row.action is ImportAction.ADD else "yellow"
        table.add_row(escape(row.chinese), escape(row.english), f"[{style}]{row.action.label}[/]")
    console.print(table)

    if not preview:
        console.print("[yellow]Nothing to import.[/]")
        return
    if not yes and not typer.confirm("确认导入？"):
        raise typer.Exit(0)

    applied = store.import_commit(preview)
    console.print(f"[green]Imported {applied} roots[/]")


@app.command()
def info():
    """Show storage location and dictionary sizes."""
    store = _store()
    dictionary = store.effective_dictionary()

    console.print(f"[bold]FieldRoot v{__version__}[/]\n")

    table = Table(title="Word-root dictionary")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Root library", str(config.USER_DIR / f"{config.OVERLAY_SLOT}.json"))
    table.add_row("Built-in roots", str(len(store.base)))
    table.add_row("Custom roots", str(store.count))
    table.add_row("Effective roots", str(len(dictionary)))
    table.add_row("Lookahead (longest root)", str(dictionary.max_key_length))
    table.add_row("Separator", repr(config.SEPARATOR))
    console.print(table)


if __name__ == "__main__":
    app()
