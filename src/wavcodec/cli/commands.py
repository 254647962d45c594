import sys
from pathlib import Path
from typing import Annotated

import numpy as np
from cyclopts import App, Parameter
from rich.console import Console
from rich.table import Table

from wavcodec.cli.validators import validate_bit_depth, validate_positive_integer
from wavcodec.format import DecodeError, load_wav, save_wav
from wavcodec.format.riff import RiffError, parse
from wavcodec.format.types import Bits

app = App(name="wavcodec", help="A utility for inspecting and converting WAV files")
console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(message, style="bold red")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(message, style="bold green")


@app.command
def info(
    file: Path,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
    preview: Annotated[int, Parameter(validator=validate_positive_integer)] = 8,
) -> int:
    """
    Display the format and sample statistics of a WAV file.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    output_json: bool
        Output results as JSON (default: False)
    preview: int
        Number of leading samples to show (default: 8)
    """
    if not file.exists():
        print_error(f"Error: File not found: {file}")
        return 1

    try:
        wave = load_wav(file)
    except (DecodeError, OSError) as e:
        print_error(f"Error decoding {file}: {e}")
        return 1

    peak = float(np.max(np.abs(wave.samples))) if len(wave.samples) else 0.0
    details = {
        "path": str(file),
        "format": wave.format_code.display_name,
        "sample_rate": wave.sample_rate,
        "channels": wave.channels,
        "bits": int(wave.bits),
        "block_align": wave.block_align,
        "bytes_per_second": wave.bytes_per_second,
        "total_samples": len(wave.samples),
        "duration_seconds": wave.duration,
        "peak": peak,
        "preview": wave.samples[:preview].tolist(),
    }

    if output_json:
        console.print_json(data=details)
        return 0

    console.print(f"[bold]WAV File: {file}[/bold]")
    console.print(f"  Format: {details['format']}")
    console.print(f"  Sample rate: {wave.sample_rate} Hz")
    console.print(f"  Channels: {wave.channels}")
    console.print(f"  Bit depth: {int(wave.bits)}-bit")
    console.print(f"  Block align: {wave.block_align}")
    console.print(f"  Bytes per second: {wave.bytes_per_second:,}")
    console.print(f"  Total samples: {len(wave.samples):,}")
    console.print(f"  Duration: {wave.duration:.3f}s")
    console.print(f"  Peak: {peak:.4f}")
    console.print(f"  First samples: {', '.join(f'{s:.4f}' for s in details['preview'])}")

    return 0


@app.command
def chunks(file: Path) -> int:
    """
    List the RIFF chunks of a file in order.

    Parameters
    ----------
    file: Path
        The path to the RIFF file
    """
    if not file.exists():
        print_error(f"Error: File not found: {file}")
        return 1

    try:
        container = parse(file.read_bytes())
    except (RiffError, OSError) as e:
        print_error(f"Error reading {file}: {e}")
        return 1

    console.print(f"[bold]RIFF form: {container.form_type.decode('latin-1')}[/bold]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Tag", justify="left")
    table.add_column("Size", justify="right")

    for index, (tag, payload) in enumerate(container.chunks):
        table.add_row(str(index), repr(tag.decode("latin-1")), f"{len(payload):,}")

    console.print(table)
    return 0


@app.command
def convert(
    source: Path,
    output: Path,
    bits: Annotated[int | None, Parameter(validator=validate_bit_depth)] = None,
) -> int:
    """
    Re-encode a WAV file, optionally at a different bit depth.

    Parameters
    ----------
    source: Path
        The .wav file to read
    output: Path
        Where to write the converted .wav file
    bits: int
        Target bits per sample: 8, 16, 24 or 32 (default: keep source depth)
    """
    if not source.exists():
        print_error(f"Error: File not found: {source}")
        return 1

    try:
        wave = load_wav(source)
    except (DecodeError, OSError) as e:
        print_error(f"Error decoding {source}: {e}")
        return 1

    if bits is not None:
        wave = wave.with_bits(Bits(bits))

    try:
        save_wav(output, wave)
    except OSError as e:
        print_error(f"Error writing output: {e}")
        return 1

    print_success(f"Converted {source} -> {output}")
    console.print(f"  Bit depth: {int(wave.bits)}-bit")
    console.print(f"  Samples: {len(wave.samples):,}")

    return 0


if __name__ == "__main__":
    sys.exit(app())
