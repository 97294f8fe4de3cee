"""Language detection: extension table first, content scoring second."""

from pathlib import PurePath

UNKNOWN_LANGUAGE = "Unknown"

EXTENSION_LANGUAGES: dict[str, str] = {
    "rs": "Rust",
    "py": "Python",
    "js": "JavaScript",
    "jsx": "JavaScript",
    "ts": "TypeScript",
    "tsx": "TypeScript",
    "java": "Java",
    "c": "C",
    "h": "C",
    "cpp": "C++",
    "hpp": "C++",
    "cs": "C#",
    "go": "Go",
    "php": "PHP",
    "rb": "Ruby",
    "swift": "Swift",
    "kt": "Kotlin",
    "scala": "Scala",
    "html": "HTML",
    "htm": "HTML",
    "css": "CSS",
    "scss": "SCSS",
    "sass": "Sass",
    "less": "Less",
    "svg": "SVG",
    "json": "JSON",
    "yaml": "YAML",
    "yml": "YAML",
    "xml": "XML",
    "toml": "TOML",
    "ini": "INI",
    "md": "Markdown",
    "markdown": "Markdown",
    "rst": "reStructuredText",
    "asciidoc": "AsciiDoc",
    "adoc": "AsciiDoc",
    "sh": "Shell",
    "bash": "Shell",
    "zsh": "Shell",
    "fish": "Shell",
    "ps1": "PowerShell",
    "bat": "Batch",
    "cmd": "Batch",
    "sql": "SQL",
    "graphql": "GraphQL",
    "proto": "Protocol Buffers",
}

# Signature tokens scored when the extension says nothing (txt, conf, ...).
LANGUAGE_SIGNATURES: dict[str, tuple[str, ...]] = {
    "Go": ("func ", "package ", ":= "),
    "Java": ("public class ", "private ", "void "),
    "JavaScript": ("function ", "const ", "let "),
    "Python": ("def ", "import ", "class "),
    "Rust": ("fn ", "impl ", "pub "),
}


def score_languages(content: str) -> dict[str, int]:
    """Occurrences of each language's signature tokens in the content."""
    return {
        language: sum(content.count(token) for token in tokens)
        for language, tokens in LANGUAGE_SIGNATURES.items()
    }


def detect_language(path: PurePath, content: str) -> str:
    """
    Classify a file.

    The extension table wins when it knows the extension. Otherwise the
    highest signature score wins, ties going to the alphabetically first
    language name. Content that scores zero everywhere is "Unknown".
    """
    ext = path.suffix[1:].lower()
    if ext in EXTENSION_LANGUAGES:
        return EXTENSION_LANGUAGES[ext]

    scores = score_languages(content)
    best = min(scores, key=lambda language: (-scores[language], language))
    if scores[best] == 0:
        return UNKNOWN_LANGUAGE
    return best
