#!/usr/bin/env python3
"""
DTSX Flat File Specification Exporter - Main Application

Visual Studio cannot export the column layout described in a Flat File
connection manager. This tool reads the .dtsx packages of a folder and
writes, for every flat file connection manager, a {name}.csv file with the
position, name, type and size of each column so it can be pasted into the
technical documentation.

To get a .dtsx file, unzip the .ispac archive found in the bin\\Development
folder of the Visual Studio solution and copy Package.dtsx out of it.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional
import logging

from config import settings
from exceptions import MalformedXMLError, UnreadableInputError, UnwritableOutputError
from models import ConnectionManagerExport, ExportReport, PackageExport
from parsing import FlatFileParser, load_file
from mapping import calculate_layout
from export import serialize_rows, write_csv, output_path

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO', log_file: Optional[str] = None):
    """Configure root logging for command line use."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )


class FlatFileSpecApp:
    """Exports flat file connection manager layouts to .csv files."""

    def __init__(self, output_directory: Optional[str] = None,
                 input_encoding: Optional[str] = None,
                 output_encoding: Optional[str] = None,
                 file_pattern: Optional[str] = None):
        self.parser = FlatFileParser()
        self.output_base = Path(output_directory or settings.output_directory)
        self.input_encoding = input_encoding or settings.input_encoding
        self.output_encoding = output_encoding or settings.output_encoding
        self.file_pattern = file_pattern or settings.file_pattern

        # Create output directory
        self._ensure_output_directory()

    def _ensure_output_directory(self):
        """Ensure the output directory exists."""
        self.output_base.mkdir(parents=True, exist_ok=True)

    def export_package(self, dtsx_path: str) -> PackageExport:
        """
        Export every flat file connection manager of one package.

        A malformed package, or a connection manager whose columns cannot be
        re-parsed, fails the package; a file that cannot be written only
        fails its own connection manager.
        """
        dtsx_file = Path(dtsx_path)
        result = PackageExport(package_file=dtsx_file.name)

        try:
            root = load_file(str(dtsx_file), self.input_encoding)
            managers = self.parser.find_flat_file_managers(root, result.warnings)
        except (MalformedXMLError, UnreadableInputError) as e:
            logger.error(f"[FAILED] {dtsx_file.name} - {e}")
            result.error = str(e)
            return result

        logger.info(f"  Flat file connection managers: {len(managers)}")

        for info, element in managers:
            export = ConnectionManagerExport(
                connection=info,
                output_file=str(output_path(str(self.output_base), info.name)),
            )
            result.exports.append(export)
            logger.info(f"  Export specification for flatfile [{info.name}]")

            try:
                columns = self.parser.extract_columns(element, export.warnings)
            except MalformedXMLError as e:
                export.error = str(e)
                result.error = str(e)
                logger.error(f"[FAILED] {dtsx_file.name} - {e}")
                return result

            export.columns = columns
            try:
                rows = calculate_layout(columns)
                export.content = serialize_rows(rows)
                export.column_count = len(rows)
                write_csv(str(self.output_base), info.name, export.content, self.output_encoding)
                export.success = True
                logger.info(f"  [SAVED] {export.output_file} ({len(rows)} column(s))")
            except UnwritableOutputError as e:
                export.error = str(e)
                logger.error(f"  [FAILED] {info.name} - {e}")

            for warning in export.warnings:
                logger.warning(f"  [WARNING] {warning}")

        for warning in result.warnings:
            logger.warning(f"  [WARNING] {warning}")

        result.success = True
        return result

    def export_folder(self, folder_path: str) -> ExportReport:
        """
        Export all packages found in a folder.

        Args:
            folder_path: Path to folder containing .dtsx files

        Returns:
            Report with one entry per package
        """
        folder = Path(folder_path)

        if not folder.exists() or not folder.is_dir():
            raise NotADirectoryError(f"Folder not found: {folder_path}")

        report = ExportReport(
            input_directory=str(folder.resolve()),
            output_directory=str(self.output_base),
        )

        dtsx_files = sorted(folder.glob(self.file_pattern))

        if not dtsx_files:
            logger.info(f"There is no .dtsx file in the {folder.resolve()} folder.")
            logger.info("Nothing to do.")
            return report

        logger.info(f"Found {len(dtsx_files)} SSIS package(s) in: {folder_path}")
        logger.info("=" * 60)

        for i, dtsx_file in enumerate(dtsx_files, 1):
            logger.info(f"[{i}/{len(dtsx_files)}] Processing: {dtsx_file.name}")
            logger.info("-" * 60)
            try:
                report.packages.append(self.export_package(str(dtsx_file)))
            except Exception as e:
                logger.error(f"[FAILED] {dtsx_file.name} - {e}")
                report.packages.append(PackageExport(
                    package_file=dtsx_file.name,
                    error=f"{type(e).__name__}: {e}",
                ))

        return report

    def print_summary(self, report: ExportReport, show_content: bool = False):
        """Log the outcome of every package and connection manager."""
        if not report.packages:
            logger.info("No files processed.")
            return

        exports = [e for p in report.packages for e in p.exports]

        logger.info("=" * 60)
        logger.info("EXPORT SUMMARY")
        logger.info("=" * 60)
        logger.info(f"Packages: {len(report.packages)} "
                    f"({sum(1 for p in report.packages if not p.success)} failed)")
        logger.info(f"Flat file connection managers: {len(exports)} "
                    f"({sum(1 for e in exports if not e.success)} failed)")

        for package in report.packages:
            if not package.success:
                logger.info(f"[FAILED] {package.package_file} - {package.error}")
                continue
            logger.info(f"[SUCCESS] {package.package_file}")
            for export in package.exports:
                if export.success:
                    logger.info(f"  [SUCCESS] {export.output_file}")
                    if show_content:
                        logger.info("\n" + export.content)
                else:
                    logger.info(f"  [FAILED] {export.output_file} - {export.error}")
        logger.info("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parser = argparse.ArgumentParser(
        description='Export Flat File connection managers of SSIS packages to .csv files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Export every package of the current folder
  dtsx-flatfile-spec

  # Export a single package into another folder
  dtsx-flatfile-spec Package.dtsx --output docs/
        '''
    )

    parser.add_argument(
        'input',
        nargs='?',
        default=settings.input_directory,
        help='Path to .dtsx file or folder containing .dtsx files (default: current folder)'
    )

    parser.add_argument(
        '--output',
        default=settings.output_directory,
        help='Output directory for generated .csv files (default: current folder)'
    )

    parser.add_argument(
        '--report',
        type=str,
        default=None,
        help='Write a JSON report of the run to this file'
    )

    parser.add_argument(
        '--show-content',
        action='store_true',
        help='Print the generated .csv content in the summary'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    configure_logging(settings.log_level, settings.log_file)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        app = FlatFileSpecApp(output_directory=args.output)
        input_path = Path(args.input)

        if input_path.is_file():
            logger.info("Mode: Single file export")
            report = ExportReport(
                input_directory=str(input_path.parent.resolve()),
                output_directory=str(app.output_base),
                packages=[app.export_package(str(input_path))],
            )
        elif input_path.is_dir():
            logger.info("Mode: Batch folder export")
            report = app.export_folder(str(input_path))
        else:
            logger.error(f"[ERROR] Invalid input: {args.input}")
            logger.error("  Input must be a .dtsx file or folder containing .dtsx files")
            return 1

        app.print_summary(report, show_content=args.show_content)

        if args.report:
            with open(args.report, 'w', encoding='utf-8') as f:
                f.write(report.model_dump_json(indent=2))
            logger.info(f"[SAVED] Report: {args.report}")

        if report.failed_count > 0:
            logger.warning(f"[WARNING] {report.failed_count} export(s) failed")
            return 1

        logger.info("Process finished")
        return 0

    except KeyboardInterrupt:
        logger.info("[INTERRUPTED] Export interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"[ERROR] Application error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
