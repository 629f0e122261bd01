"""
Download a word list from the web and write a clean hangman dictionary.

What it does:
- Downloads the page (HTML or plain text).
- For HTML, parses the visible text; plain text is used as-is.
- Extracts alphabetic tokens within --min-length/--max-length.
- Lowercases, de-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.fetch_dictionary --url <page> --out packages/datasets/data/dictionary.txt
    # alphabetical, only 4-8 letter words:
    python -m script.fetch_dictionary --url <page> --min-length 4 --max-length 8 --sort
"""

import re
import argparse
from typing import List

import requests
from bs4 import BeautifulSoup

from packages.datasets.io import write_lines

URL = "https://www.mit.edu/~ecprice/wordlist.10000"
TOKEN_RE = re.compile(r"\b[A-Za-z]+\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, *, min_length: int = 1, max_length: int | None = None) -> List[str]:
    """Lowercased alphabetic tokens in length range, first occurrence order."""
    words = []
    for m in TOKEN_RE.finditer(text):
        w = m.group(0).lower()
        if len(w) < min_length or (max_length is not None and len(w) > max_length):
            continue
        words.append(w)
    return unique_preserve_order(words)


def page_text(body: str, content_type: str) -> str:
    """Visible text of an HTML page, or the body unchanged for plain text."""
    if "html" in content_type.lower():
        soup = BeautifulSoup(body, "html.parser")
        return soup.get_text("\n", strip=True)
    return body


def fetch_words(url: str = URL, *, min_length: int = 1, max_length: int | None = None) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = page_text(r.text, r.headers.get("Content-Type", ""))
    return extract_words(text, min_length=min_length, max_length=max_length)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for evil hangman")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/dictionary.txt")
    ap.add_argument("--min-length", type=int, default=3)
    ap.add_argument("--max-length", type=int)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, min_length=args.min_length, max_length=args.max_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
