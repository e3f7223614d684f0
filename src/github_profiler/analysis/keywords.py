"""Keyword vocabularies used to extract claims from a profile README.

Matching is heuristic. Bump ``KEYWORDS_VERSION`` whenever a list changes so
exported consistency signals can be compared across runs.
"""

import re

KEYWORDS_VERSION = "1"

KNOWN_LANGUAGES: tuple[str, ...] = (
    "TypeScript",
    "JavaScript",
    "Python",
    "Go",
    "Rust",
    "Java",
    "C++",
    "C#",
    "C",
    "Ruby",
    "PHP",
    "Kotlin",
    "Swift",
    "Scala",
    "Haskell",
    "Elixir",
    "Clojure",
    "Dart",
    "Objective-C",
    "Shell",
    "Bash",
    "Lua",
)

# Names whose punctuation defeats a plain \b...\b match
_SPECIAL_LANGUAGE_PATTERNS = {
    "C++": r"\bC\+\+(?=\s|,|;|\.|$)",
    "C#": r"\bC#(?=\s|,|;|\.|$)",
    "C": r"\bC(?![+#])(?=\s|,|;|\.|$)",
    "Objective-C": r"\bObjective-C\b",
}

# Any of these implies JavaScript
JS_ECOSYSTEM_KEYWORDS: tuple[str, ...] = (
    "Node.js",
    "Node",
    "Next.js",
    "Next",
    "Vue.js",
    "Vue",
    "React.js",
    "React",
    "Svelte",
    "Angular",
    "Nuxt.js",
    "Nuxt",
    "Express.js",
    "Express",
    "Nest.js",
    "NestJS",
)

KNOWN_TOPICS: tuple[str, ...] = (
    # Frontend frameworks
    "react",
    "vue",
    "angular",
    "svelte",
    "next.js",
    "nuxt",
    "gatsby",
    # Backend frameworks
    "express",
    "fastify",
    "koa",
    "nest",
    "django",
    "flask",
    "fastapi",
    "rails",
    "spring",
    "laravel",
    # Mobile
    "react-native",
    "flutter",
    "ionic",
    "xamarin",
    # Databases
    "postgresql",
    "mysql",
    "mongodb",
    "redis",
    "elasticsearch",
    "sqlite",
    "cassandra",
    # Cloud and hosting
    "aws",
    "azure",
    "gcp",
    "vercel",
    "netlify",
    "heroku",
    "digitalocean",
    # Infrastructure
    "docker",
    "kubernetes",
    "k8s",
    "helm",
    "terraform",
    # CI/CD
    "github-actions",
    "gitlab-ci",
    "jenkins",
    "circleci",
    "travis-ci",
    # Testing
    "jest",
    "mocha",
    "pytest",
    "junit",
    "cypress",
    "selenium",
    # Build tools and package managers
    "webpack",
    "vite",
    "rollup",
    "esbuild",
    "parcel",
    "babel",
    "npm",
    "yarn",
    "pnpm",
    "pip",
    "cargo",
    "maven",
    "gradle",
    # APIs and protocols
    "graphql",
    "rest",
    "grpc",
    "websocket",
    "oauth",
    "jwt",
    # Machine learning and data
    "tensorflow",
    "pytorch",
    "scikit-learn",
    "keras",
    "pandas",
    "numpy",
    # Blockchain
    "ethereum",
    "solidity",
    "web3",
    "blockchain",
    # Game development
    "unity",
    "unreal",
    "godot",
)


def _compile_language(lang: str) -> re.Pattern[str]:
    pattern = _SPECIAL_LANGUAGE_PATTERNS.get(lang, rf"\b{re.escape(lang)}\b")
    return re.compile(pattern, re.IGNORECASE)


LANGUAGE_PATTERNS: dict[str, re.Pattern[str]] = {
    lang: _compile_language(lang) for lang in KNOWN_LANGUAGES
}

JS_ECOSYSTEM_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE) for keyword in JS_ECOSYSTEM_KEYWORDS
)

TOPIC_PATTERNS: dict[str, re.Pattern[str]] = {
    topic: re.compile(rf"\b{re.escape(topic)}\b") for topic in KNOWN_TOPICS
}


def extract_languages(text: str) -> list[str]:
    """Programming languages asserted in ``text``, in vocabulary order."""
    found = [lang for lang, pattern in LANGUAGE_PATTERNS.items() if pattern.search(text)]
    if "JavaScript" not in found and any(p.search(text) for p in JS_ECOSYSTEM_PATTERNS):
        found.append("JavaScript")
    return found


def extract_topics(text: str) -> list[str]:
    """Known topic keywords present in ``text``, sorted. Matching is on lowercased text."""
    haystack = text.lower()
    return sorted(topic for topic, pattern in TOPIC_PATTERNS.items() if pattern.search(haystack))
