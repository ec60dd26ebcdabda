#!/usr/bin/env python3
"""
Hyperglossary - Command Line Interface
"""
import sys
import click
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from hyperglossary import __version__
from hyperglossary.core.exceptions import GlossarySystemError
from hyperglossary.core.factory import GlossarySystemFactory
from hyperglossary.core.interfaces import IProgressCallback
from hyperglossary.core.models import BuildJob
from hyperglossary.glossary.cross_referencer import CrossReferencer
from hyperglossary.utils.config_manager import AppConfig, ConfigManager
from hyperglossary.utils.logger import setup_logging_from_config


console = Console()


class RichProgressCallback(IProgressCallback):
    """Progress callback using Rich library."""

    def __init__(self, progress: Progress, task_id):
        self.progress = progress
        self.task_id = task_id

    def on_start(self, job: BuildJob) -> None:
        pass

    def on_progress(self, job: BuildJob, current: int, total: int) -> None:
        self.progress.update(self.task_id, completed=current, total=total)

    def on_complete(self, job: BuildJob) -> None:
        pass

    def on_error(self, job: BuildJob, error: Exception) -> None:
        console.print(f"[red]Error: {escape(str(error))}[/red]")


def _load_config(config_path, verbose: bool) -> AppConfig:
    config = ConfigManager(config_path).config
    setup_logging_from_config(config.logging, verbose)
    return config


def _fail(error):
    console.print(f"\n[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Hyperglossary - Build a cross-linked HTML glossary from a text file."""
    pass


@cli.command()
@click.option('--input', '-i', 'input_file', prompt='Please enter the name of the input file',
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Glossary text file')
@click.option('--output', '-o', 'output_dir',
              prompt='Please enter the name of the folder to save output files in',
              type=click.Path(file_okay=False, path_type=Path),
              help='Folder for the generated pages')
@click.option('--config', '-c', 'config_path', type=click.Path(path_type=Path),
              help='YAML or JSON config file')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def build(input_file, output_dir, config_path, verbose):
    """
    Build the glossary site: one page per term plus index.html.

    Examples:

        # Prompt for the input file and output folder
        hyperglossary build

        # Non-interactive
        hyperglossary build -i terms.txt -o site
    """
    console.print("\n[bold cyan]📖 Hyperglossary[/bold cyan]")
    console.print(f"[dim]Input:  {input_file}[/dim]")
    console.print(f"[dim]Output: {output_dir}[/dim]\n")

    try:
        config = _load_config(config_path, verbose)
        pipeline = GlossarySystemFactory.create_pipeline(output_dir, config)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console
        ) as progress:
            task = progress.add_task("[cyan]Writing pages...", total=None)
            callback = RichProgressCallback(progress, task)
            job = pipeline.build_site(input_file, progress_callback=callback)

        console.print(f"\n[bold green]✓ Glossary built![/bold green]")
        console.print(f"[dim]Index: {job.index_path}[/dim]\n")

        table = Table(title="Build Statistics")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Terms", str(job.total_terms))
        table.add_row("Linked definitions", str(job.linked_definitions))
        table.add_row("Pages written", str(job.pages_written))
        table.add_row("Duration", f"{job.duration:.2f}s")

        console.print(table)

    except KeyboardInterrupt:
        console.print("\n[yellow]Build cancelled by user[/yellow]")
        sys.exit(1)
    except GlossarySystemError as e:
        _fail(e)


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--config', '-c', 'config_path', type=click.Path(path_type=Path),
              help='YAML or JSON config file')
def check(input_file, config_path):
    """Parse and cross-reference INPUT_FILE without writing any pages."""
    try:
        config = _load_config(config_path, verbose=False)
        parser = GlossarySystemFactory.create_parser(config)
        glossary = parser.parse(input_file)
        cross_referencer = CrossReferencer(page_suffix=config.render.page_suffix)
        cross_referencer.cross_reference(glossary)
    except GlossarySystemError as e:
        _fail(e)

    stats = cross_referencer.get_stats()

    table = Table(title=f"{input_file.name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Terms", str(len(glossary)))
    table.add_row("Linked definitions", str(stats['definitions_linked']))
    table.add_row("Candidates matched", str(stats['candidates_matched']))

    console.print(table)
    console.print("[green]✓ Input is valid[/green]")


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('term')
def show(input_file, term):
    """Print the hyperlinked definition of TERM."""
    try:
        glossary = GlossarySystemFactory.create_parser().parse(input_file)
    except GlossarySystemError as e:
        _fail(e)

    if term not in glossary:
        _fail(f"Unknown term: {term}")

    linked = CrossReferencer().cross_reference(glossary)
    click.echo(linked[term])


@cli.command('config-template')
@click.argument('output_path', type=click.Path(dir_okay=False, path_type=Path))
def config_template(output_path):
    """Write a commented configuration template to OUTPUT_PATH."""
    ConfigManager().export_template(output_path)
    console.print(f"[green]✓ Template written to {output_path}[/green]")


def main():
    cli()


if __name__ == '__main__':
    main()
