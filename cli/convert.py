import argparse
import sys
from pathlib import Path

# Add the repo root to Python path for imports
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from adif_text.exceptions import AdifError
from adif_text.writer import write_document
from codec.document import adif_to_document, document_to_adif
from models.wire import dump_json, parse_json
from utils.logger import setup_logging


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def _emit(text: str, out: str | None) -> None:
    if out:
        write_document(out, text)
    else:
        sys.stdout.write(text)


def adif2json(args) -> None:
    doc = adif_to_document(_read(args.input), workers=args.workers)
    _emit(dump_json(doc, indent=args.indent) + "\n", args.output)


def json2adif(args) -> None:
    doc = parse_json(_read(args.input))
    _emit(document_to_adif(doc), args.output)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser("adif-convert — convert between ADI text and JSON")
    ap.add_argument("--log-level", default="WARNING")
    sub = ap.add_subparsers(dest="command", required=True)

    a2j = sub.add_parser("adif2json", help="ADI text to JSON document")
    a2j.add_argument("input", help="ADI file, or - for stdin")
    a2j.add_argument("-o", "--output", help="write here instead of stdout")
    a2j.add_argument("--workers", type=int, default=1, help="decode records in parallel")
    a2j.add_argument("--indent", type=int, default=None)
    a2j.set_defaults(func=adif2json)

    j2a = sub.add_parser("json2adif", help="JSON document to ADI text")
    j2a.add_argument("input", help="JSON file, or - for stdin")
    j2a.add_argument("-o", "--output", help="write here instead of stdout")
    j2a.set_defaults(func=json2adif)

    args = ap.parse_args(argv)
    setup_logging(args.log_level)
    try:
        args.func(args)
    except (AdifError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
