"""Batch extraction of Código/Descripción/Cantidad/Descuento tables from .txt reports (CSV in 'outputs/')"""
import argparse
import logging
import sys
import traceback

from report_extractor import Column, ReportExtractionPipeline, gather_input_files
from report_extractor.exporter import records_to_dataframe
from report_extractor.utils import set_package_log_level


def parse_filter(value):
    """Parse a COLUMN=PATTERN command line filter."""
    column, sep, pattern = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected COLUMN=PATTERN, got {value!r}")
    try:
        return Column.resolve(column), pattern
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_column(value):
    try:
        return Column.resolve(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def print_summary(results):
    for result in results:
        if result.ok:
            print(f"✅ {result.source_id}: {len(result.records)} registro(s)")
        else:
            print(f"❌ {result.source_id}: {result.error}")


def print_view(records):
    if not records:
        print("\nNo hay datos para mostrar")
        return
    print(f"\nDatos Extraídos ({len(records)} registros)\n")
    print(records_to_dataframe(records).to_string(index=False))


def main():
    parser = argparse.ArgumentParser(description="Extract report tables from .txt files (batch-friendly)")
    parser.add_argument("inputs", nargs="*", help="Files or folders to process.")
    parser.add_argument("-r", "--recursive", action="store_true", help="Recurse into subfolders when a folder is provided.")
    parser.add_argument("-f", "--filter", action="append", type=parse_filter, default=[], metavar="COLUMN=PATTERN",
                        help="Case-insensitive substring filter on a column (repeatable).")
    parser.add_argument("-s", "--sort", action="append", type=parse_column, default=[], metavar="COLUMN",
                        help="Cycle the sort on a column: once ascending, twice descending (repeatable).")
    parser.add_argument("-o", "--output-dir", default="outputs", help="Folder for the exported CSV (default: outputs).")
    parser.add_argument("--no-export", action="store_true", help="Print the table without writing a CSV.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log discarded lines and other debug output.")
    parser.add_argument("--serve-api", action="store_true", help="Start the HTTP API server instead of running a batch.")
    parser.add_argument("--api-host", default="0.0.0.0", help="Host for the API server (default: 0.0.0.0).")
    parser.add_argument("--api-port", type=int, default=5000, help="Port for the API server (default: 5000).")

    args = parser.parse_args()

    if args.verbose:
        set_package_log_level(logging.DEBUG)

    try:
        if args.serve_api:
            from api import app

            print(f"🌐 Starting API server on {args.api_host}:{args.api_port} ...")
            app.run(host=args.api_host, port=args.api_port)
            return

        if not args.inputs:
            parser.error("at least one file or folder is required")

        files = gather_input_files(args.inputs, recursive=args.recursive)
        if not files:
            print("❌ No se encontraron archivos .txt válidos en las rutas indicadas.")
            sys.exit(2)

        pipeline = ReportExtractionPipeline()
        results = pipeline.process_files(files)
        print_summary(results)

        for column, pattern in args.filter:
            pipeline.store.set_filter(column, pattern)
        for column in args.sort:
            pipeline.store.cycle_sort(column)

        records = pipeline.view()
        print_view(records)

        if args.no_export or not records:
            return

        csv_path = pipeline.export_csv(args.output_dir)
        print(f"\n🧾 CSV escrito en : {csv_path}")

    except Exception as e:
        print(f"\nERROR : {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
