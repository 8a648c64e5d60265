#!/usr/bin/env python3
"""
diagram.py

Render the topology diagram(s) gem5 writes into a run folder (*.tex) to PNG:
pdflatex produces a PDF, pdftoppm rasterizes its first page to <name>.png.

Usage:
  gem5-fft-diagram results/fft/FFT_m18_Ring_16c_4x1_c4_1GHz
"""
import subprocess
import sys
from pathlib import Path

PDFLATEX = "pdflatex"
PDFTOPPM = "pdftoppm"
DPI = 150


def render(tex_path):
    """Render one .tex file next to itself; return the PNG path or None."""
    tex_path = Path(tex_path)
    workdir = tex_path.parent
    pdf_path = tex_path.with_suffix(".pdf")
    png_stem = tex_path.with_suffix("")

    latex = subprocess.run(
        [PDFLATEX, "-interaction=nonstopmode", "-halt-on-error", tex_path.name],
        cwd=workdir,
        stdout=subprocess.DEVNULL,
    )
    if latex.returncode != 0 or not pdf_path.exists():
        print(f"[ERR] pdflatex failed on {tex_path} (status {latex.returncode})")
        return None

    ppm = subprocess.run(
        [PDFTOPPM, "-png", "-singlefile", "-r", str(DPI), str(pdf_path), str(png_stem)]
    )
    if ppm.returncode != 0:
        print(f"[ERR] pdftoppm failed on {pdf_path} (status {ppm.returncode})")
        return None
    png = png_stem.with_suffix(".png")
    print(f"Saved: {png}")
    return png


def render_dir(run_dir):
    """Render every *.tex in run_dir; return (rendered, failed) counts."""
    run_dir = Path(run_dir)
    if not run_dir.is_dir():
        raise SystemExit(f"Run directory not found: {run_dir}")
    tex_files = sorted(run_dir.glob("*.tex"))
    if not tex_files:
        print(f"NOTE: no .tex diagrams in {run_dir}")
    rendered = failed = 0
    for tex in tex_files:
        try:
            png = render(tex)
        except FileNotFoundError as e:
            print(f"[ERR] TeX toolchain not available: {e}")
            return rendered, len(tex_files) - rendered
        if png is None:
            failed += 1
        else:
            rendered += 1
    return rendered, failed


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print("Usage: gem5-fft-diagram RUN_DIR")
        return 1
    _, failed = render_dir(argv[0])
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
