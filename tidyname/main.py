import argparse
import json
import sys
from datetime import date
from dotenv import load_dotenv
from tidyname import session, settings
from tidyname.downloads import handle_download
from tidyname.rename import NamingContext, decide_filename


def _read_payload(stream) -> dict:
    raw = stream.read()
    if not raw.strip():
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("payload must be a JSON object")
    return data


def _run_stdin(dry_run: bool) -> int:
    try:
        payload = _read_payload(sys.stdin)
    except ValueError as e:
        print(f"invalid download payload: {e}", file=sys.stderr)
        return 2
    if not payload.get("filename"):
        print("invalid download payload: missing filename", file=sys.stderr)
        return 2
    decision = handle_download(payload, record=not dry_run)
    json.dump(decision, sys.stdout)
    sys.stdout.write("\n")
    return 0


def main(argv=None) -> int:
    load_dotenv()
    settings.configure_logging()
    ap = argparse.ArgumentParser(prog="tidyname", description="Give downloads with meaningless names a readable one")
    ap.add_argument("--name", help="suggested filename of the download")
    ap.add_argument("--url", default="", help="URL the file is downloaded from")
    ap.add_argument("--title", help="title of the page that started the download")
    ap.add_argument("--mime", help="content type of the response")
    ap.add_argument("--content-disposition", help="raw Content-Disposition header")
    ap.add_argument("--date", type=date.fromisoformat, help="date to stamp (YYYY-MM-DD, default today)")
    ap.add_argument("--stdin", action="store_true", help="read a JSON download item from stdin and print the decision")
    ap.add_argument("--history", action="store_true", help="show the recent renames")
    ap.add_argument("--dry-run", action="store_true", help="do not record renames in the history")
    args = ap.parse_args(argv)

    if args.history:
        for h in session.load_history():
            print(f"{h.get('original')} -> {h.get('renamed')}")
        return 0

    if args.stdin:
        return _run_stdin(args.dry_run)

    if not args.name:
        ap.error("--name is required unless --stdin or --history is given")

    result = decide_filename(NamingContext(
        original_name=args.name,
        url=args.url,
        page_title=args.title,
        mime_type=args.mime,
        content_disposition=args.content_disposition,
    ), today=args.date)

    if result.changed:
        if not args.dry_run:
            session.record_rename(args.name, result.filename)
        print(f"[RENAMED] {args.name} -> {result.filename}")
    else:
        print(f"[KEPT] {args.name}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
