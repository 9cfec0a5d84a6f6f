
# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Main entry point for the CV Gallery CLI.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from cv_gallery.config import load_config, parse_comma_separated
from cv_gallery.generator import CVGenerator
from cv_gallery.loader import CVLoadError, load_cv
from cv_gallery.markdown import normalize_markdown_in_object
from cv_gallery.normalizer import normalize_cv
from cv_gallery.themes import THEMES, get_theme

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int, log_file: str = None):
    """
    Configures logging:
    - Console (stderr): default=WARNING, -v=INFO, -vv=DEBUG
    - File: optional, always DEBUG
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Repeated calls replace the handlers installed by a previous call
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()

    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root.addHandler(file_handler)

    if verbosity < 2:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a YAML CV through a gallery of themes")
    parser.add_argument("source", nargs="?", help="Path or URL of the CV YAML (default: $CV_GALLERY_SOURCE or CV.yaml)")
    parser.add_argument("--theme", help="Theme id (see --list-themes)")
    parser.add_argument("--exclude", help="Comma-separated sections to hide (e.g. 'projects,awards')")
    parser.add_argument("--output", default="CV.docx", help="Output DOCX filename")
    parser.add_argument("--json", action="store_true", help="Print the normalised CV as JSON instead of rendering")
    parser.add_argument("--plain", action="store_true", help="Strip inline markdown from the --json output")
    parser.add_argument("--list-themes", action="store_true", help="List available themes and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", help="Also write DEBUG logs to this file")
    parser.add_argument("--ca-bundle", help="Path to a custom CA certificate bundle for HTTPS sources")
    return parser


def main():
    try:
        sys.exit(run(sys.argv[1:]))
    except KeyboardInterrupt:
        sys.stderr.write("\n[-] Cancelled by user\n")
        sys.exit(130)


def run(argv) -> int:
    """
    Loads the CV, normalises it and either prints JSON or renders a DOCX.
    Returns the process exit status.
    """
    args = build_argparser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    if args.list_themes:
        for theme in THEMES:
            print(f"{theme.id:<16} {theme.name:<16} {theme.description}")
        return 0

    config = load_config(
        excluded_sections=parse_comma_separated(args.exclude) if args.exclude is not None else None,
        theme_id=args.theme,
        source=args.source,
        ca_bundle=args.ca_bundle,
    )
    if config.has_excluded_sections:
        logger.info(f"Hiding sections: {', '.join(config.excluded_sections)}")

    try:
        document = load_cv(config.source, ca_bundle=config.ca_bundle)
    except CVLoadError as e:
        logger.error(str(e))
        return 1

    cv = normalize_cv(document, config)

    if args.json:
        data = cv.to_dict()
        if args.plain:
            data = normalize_markdown_in_object(data)
        print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        return 0

    try:
        generator = CVGenerator(theme=get_theme(config.theme_id))
        generator.generate(cv, args.output)
    except Exception as e:
        logger.error(f"Error generating CV: {e}")
        return 1

    return 0


if __name__ == "__main__":
    main()
