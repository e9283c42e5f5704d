#!/usr/bin/env python3
"""Command-line front end for the romaji input engine.

    python kana_practice.py convert gakkou "kon'i"
    python kana_practice.py match がっ がっこう
    python kana_practice.py sets
    python kana_practice.py practice --set n5 --limit 5
"""
import argparse
import sys
from typing import List, Optional, TextIO

from kanatype import DEFAULT_SET_ID
from kanatype.ime import kata_to_hira, match, to_hiragana, transliterate
from kanatype.logger import logger
from kanatype.session import PracticeSession
from kanatype.sets import WordSetError, get_set, list_sets, shuffled


def cmd_convert(args, out: TextIO) -> int:
    for text in args.text:
        result = transliterate(text)
        if args.pending:
            print(f"{result.confirmed}\t{result.pending}", file=out)
        else:
            print(result.confirmed, file=out)
    return 0


def cmd_match(args, out: TextIO) -> int:
    state = match(to_hiragana(args.typed), kata_to_hira(args.target))
    print(f"matched_count={state.matched_count} is_complete={state.is_complete}", file=out)
    return 0


def cmd_sets(args, out: TextIO) -> int:
    for summary in list_sets():
        print(f"{summary['id']}\t{summary['size']}\t{summary['label']}", file=out)
    return 0


def cmd_practice(args, out: TextIO, stdin: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    try:
        word_set = get_set(args.set)
    except WordSetError as e:
        logger.error(f"❌ {e}")
        return 1

    words = shuffled(word_set.items, seed=args.seed)
    if args.limit:
        words = words[:args.limit]
    session = PracticeSession(words)

    while not session.is_finished:
        word = session.current_word
        hint = f" ({word.romaji})" if args.romaji else ""
        print(f"{word.surface} 「{word.reading}」{hint}", file=out)

        line = stdin.readline()
        if not line:
            break
        state = session.update(line.rstrip("\n"))
        if state.is_complete:
            print("✅", file=out)
        else:
            target = session.target
            print(f"❌ {session.kana} ({state.matched_count}/{len(target)}, {state.progress(target):.0%})", file=out)

    stats = session.stats
    print(f"words={stats.words_completed} chars={stats.chars_completed} "
          f"errors={stats.errors} keystrokes={stats.keystrokes}", file=out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Romaji to hiragana typing practice')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('convert', help='Convert romaji buffers to hiragana')
    p.add_argument('text', nargs='+', help='Raw romaji input')
    p.add_argument('--pending', action='store_true', help='Also print the withheld input tail')
    p.set_defaults(func=cmd_convert)

    p = sub.add_parser('match', help='Compare typed kana against a target reading')
    p.add_argument('typed', help='Typed kana')
    p.add_argument('target', help='Target reading')
    p.set_defaults(func=cmd_match)

    p = sub.add_parser('sets', help='List available word sets')
    p.set_defaults(func=cmd_sets)

    p = sub.add_parser('practice', help='Type through a word set on stdin')
    p.add_argument('--set', type=str, default=DEFAULT_SET_ID, help='Word set id')
    p.add_argument('--seed', type=int, default=None, help='Shuffle seed')
    p.add_argument('--limit', type=int, default=0, help='Maximum number of words (0 = all)')
    p.add_argument('--romaji', action='store_true', help='Show the romaji hint for each word')
    p.set_defaults(func=cmd_practice)

    return parser


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args, out)


if __name__ == "__main__":
    sys.exit(main())
