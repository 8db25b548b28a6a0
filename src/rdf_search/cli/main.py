from __future__ import annotations

import argparse
import json

from rdf_search.settings import settings


def _configure_logging() -> None:
    import logging

    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _searcher(args: argparse.Namespace):
    from rdf_search import AggregateSearcher

    return AggregateSearcher(format=args.format)


def _load(searcher, sources: list[str]) -> None:
    for src in sources:
        if src.startswith(("http://", "https://")):
            searcher.add_source_url(src)
        else:
            searcher.add_source_path(src)


def _print_beans(beans) -> None:
    print(json.dumps([b.model_dump() for b in beans], indent=2))


def cmd_version() -> int:
    from rdf_search import __version__

    print(__version__)
    return 0


def cmd_all(args: argparse.Namespace) -> int:
    _configure_logging()
    with _searcher(args) as searcher:
        _load(searcher, args.sources)
        _print_beans(searcher.find_all())
    return 0


def cmd_subject(args: argparse.Namespace) -> int:
    _configure_logging()
    with _searcher(args) as searcher:
        _load(searcher, args.sources)
        bean = searcher.find_by_subject(args.subject)
        if bean is None:
            print(f"No statements about {args.subject}")
            return 1
        _print_beans([bean])
    return 0


def cmd_find(args: argparse.Namespace) -> int:
    _configure_logging()
    with _searcher(args) as searcher:
        _load(searcher, args.sources)
        _print_beans(searcher.find_by_predicate_object(args.predicate, args.object))
    return 0


def cmd_query(args: argparse.Namespace) -> int:
    _configure_logging()
    with _searcher(args) as searcher:
        _load(searcher, args.sources)
        print(json.dumps(searcher.search(args.query), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rdf-search")
    p.add_argument("--format", default=None, help="rdflib parser: xml|turtle|nt|n3|json-ld")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    all_ = sub.add_parser("all", help="Print every statement grouped by subject")
    all_.add_argument("sources", nargs="+", help="URLs or file paths")
    all_.set_defaults(func=cmd_all)

    subj = sub.add_parser("subject", help="Print the statements about one subject")
    subj.add_argument("subject")
    subj.add_argument("sources", nargs="+")
    subj.set_defaults(func=cmd_subject)

    find = sub.add_parser("find", help="Subjects having PREDICATE with literal OBJECT")
    find.add_argument("predicate")
    find.add_argument("object")
    find.add_argument("sources", nargs="+")
    find.set_defaults(func=cmd_find)

    query = sub.add_parser("query", help="Raw single-pattern SELECT; rows are not grouped")
    query.add_argument("query")
    query.add_argument("sources", nargs="+")
    query.set_defaults(func=cmd_query)

    return p


def app(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    app()
