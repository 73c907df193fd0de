import sys
import argparse
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Tuple, Union

__version__ = "2.0.0"

TEXT_SUFFIX = ".txt"

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  ALPHABETS: Fixed Reflection Ranges
# ==========================================

@dataclass(frozen=True)
class Alphabet:
    """A closed, contiguous range of code points reflected onto itself."""
    name: str
    low: int
    high: int

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    def contains(self, char: str) -> bool:
        return self.low <= ord(char) <= self.high

    def reflect(self, char: str) -> str:
        return chr(self.low + self.high - ord(char))

LATIN_LOWER = Alphabet("latin-lower", ord('a'), ord('z'))
LATIN_UPPER = Alphabet("latin-upper", ord('A'), ord('Z'))
# Precomposed Hangul syllables, U+AC00 (가) to U+D7A3 (힣)
HANGUL = Alphabet("hangul", 0xAC00, 0xD7A3)

ALPHABETS: Tuple[Alphabet, ...] = (LATIN_LOWER, LATIN_UPPER, HANGUL)

# ==========================================
#  CORE: Atbash Transform
# ==========================================

def find_alphabet(char: str) -> Optional[Alphabet]:
    """Return the alphabet containing ``char``, or None if it is in none of them."""
    for alphabet in ALPHABETS:
        if alphabet.contains(char):
            return alphabet
    return None

def reflect_char(char: str) -> str:
    """Mirror a single character within its alphabet; other characters are kept."""
    alphabet = find_alphabet(char)
    if alphabet is None:
        return char
    return alphabet.reflect(char)

def transform(text: Optional[str]) -> Optional[str]:
    """
    Apply the Atbash reflection to every character of ``text``.

    Each letter maps to ``(low + high) - c`` inside its own alphabet, so
    a->z, B->Y and 가->힣. Anything outside the three alphabets is copied
    through untouched. The mapping is its own inverse, so the same call
    both encrypts and decrypts.

    Returns None when ``text`` is None.
    """
    if text is None:
        return None
    return "".join(reflect_char(c) for c in text)

# Atbash is symmetric: encoding and decoding are the same operation
encode = transform
decode = transform

# ==========================================
#  FILE I/O: Plain Text Persistence
# ==========================================

PathLike = Union[str, Path]

def with_text_suffix(path: PathLike) -> Path:
    """Append ``.txt`` to the file name unless it already ends with it (any case)."""
    path = Path(path)
    if path.name.lower().endswith(TEXT_SUFFIX):
        return path
    return path.with_name(path.name + TEXT_SUFFIX)

def load_text(path: PathLike) -> str:
    """Read a whole UTF-8 text file. I/O errors propagate as OSError."""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    log_info(f"Loaded {len(text)} character(s) from {path}")
    return text

def save_text(path: PathLike, text: str, ensure_suffix: bool = True) -> Path:
    """
    Write ``text`` to ``path`` as UTF-8 and return the path actually written.

    With ``ensure_suffix`` the ``.txt`` extension is added when missing.
    I/O errors propagate as OSError. Text that cannot be encoded (lone
    surrogates) raises UnicodeEncodeError before the file is touched.
    """
    target = with_text_suffix(path) if ensure_suffix else Path(path)
    data = text.encode("utf-8")
    with open(target, "wb") as f:
        f.write(data)
    log_info(f"Saved {len(text)} character(s) to {target}")
    return target

# ==========================================
#  CLI LOGIC
# ==========================================

def list_alphabets():
    """Print all alphabets the transform reflects."""
    print("\nAvailable Alphabets:")
    print("=" * 60)
    for alphabet in ALPHABETS:
        first, last = chr(alphabet.low), chr(alphabet.high)
        span = f"U+{alphabet.low:04X}..U+{alphabet.high:04X}"
        mapping = f"{first}..{last} -> {reflect_char(first)}..{reflect_char(last)}"
        print(f"  {alphabet.name:<12} {span:<16} {alphabet.size:>6} chars  {mapping}")
    print("=" * 60)
    print("\nAll other characters pass through unchanged.")


def read_source(args) -> str:
    """Resolve the input text from --text, --input or stdin."""
    if args.text is not None:
        return args.text
    if args.input:
        try:
            return load_text(args.input)
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        except (OSError, UnicodeDecodeError) as e:
            sys.exit(f"Error reading input: {e}")
    if sys.stdin.isatty():
        print("[ATBASH] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        sys.exit(0)
    except (OSError, UnicodeDecodeError) as e:
        sys.exit(f"Error reading input: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atbash",
        description="Atbash Cipher Suite (Latin a-z / A-Z + Hangul 가-힣)",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encode", action="store_true", help="Encode mode")
    action_group.add_argument("-d", "--decode", action="store_true",
                              help="Decode mode (identical to encode, Atbash is its own inverse)")
    action_group.add_argument("-l", "--list", action="store_true", help="List the reflected alphabets")

    # Verbose output
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path (written as given)")
    return parser


def main(argv=None):
    global VERBOSE

    if argv is None:
        argv = sys.argv[1:]

    # Preliminary scan for --verbose so early diagnostics are not lost
    VERBOSE = "--verbose" in argv or "-v" in argv

    args = build_parser().parse_args(argv)

    # Handle --list action
    if args.list:
        list_alphabets()
        return 0

    # 1. READ INPUT
    source_text = read_source(args)
    if not source_text:
        log_warn("Input is empty; nothing to transform.")

    # 2. TRANSFORM
    result = transform(source_text)
    log_info(f"{'Encoded' if args.encode else 'Decoded'} {len(result)} character(s).")

    # 3. WRITE OUTPUT
    if args.output:
        try:
            save_text(args.output, result, ensure_suffix=False)
        except (OSError, UnicodeError) as e:
            sys.exit(f"Error writing output: {e}")
    elif args.text is None and not args.input:
        # Piped text already carries its own line endings
        sys.stdout.write(result)
    else:
        print(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
