"""Model-provider rewriting of the generated ``create-agent.ts``.

The ``next`` template ships agent-creation sources wired to OpenAI.  This
module swaps three blocks for the selected provider:

1. the chat-model import,
2. the "missing API key" guard,
3. the model construction expression.

The substitutions are regular-expression based rather than AST based: each
targets the first structural match and tolerates whitespace differences.
Substitutions that find nothing are reported in :attr:`RewriteResult.missed`
so the caller can warn (or fail in strict mode) instead of shipping a
half-rewritten file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from create_onchain_agent.registry.models import ModelProvider, coerce_enum
from create_onchain_agent.utils import write_text


class AgentFramework(str, Enum):
    """Calling framework detected from an agent source file."""
    LANGCHAIN = "langchain"
    VERCEL_AI_SDK = "vercel-ai-sdk"


@dataclass(frozen=True)
class ProviderRewrite:
    """Replacement blocks for one (framework, provider) pair."""
    import_line: str
    env_key: str
    constructor: str

    @property
    def guard(self) -> str:
        return (
            f"if (!process.env.{self.env_key}) {{\n"
            f'    throw new Error("I need an {self.env_key} in your .env file to power my intelligence.");\n'
            f"  }}"
        )


@dataclass
class RewriteResult:
    """Outcome of :func:`apply_model_provider_rewrites`."""
    text: str
    framework: Optional[AgentFramework] = None
    applied: list[str] = field(default_factory=list)
    missed: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return self.framework is not None and not self.missed


# ---------------------------------------------------------------------------
# Signatures and patterns
# ---------------------------------------------------------------------------

_SIGNATURES: tuple[tuple[AgentFramework, str], ...] = (
    (AgentFramework.LANGCHAIN, "@langchain/langgraph"),
    (AgentFramework.VERCEL_AI_SDK, "@ai-sdk/openai"),
)

_GUARD_PATTERN = re.compile(
    r"if\s+\(!process\.env\.OPENAI_API_KEY\)\s*{\s*throw\s+new\s+Error\([^)]+\);\s*}"
)

_PATTERNS: Mapping[AgentFramework, Mapping[str, re.Pattern[str]]] = {
    AgentFramework.LANGCHAIN: {
        "import": re.compile(r"import\s+{\s*Chat\w+\s*}\s+from\s+[\"']@langchain/\w+[\"'];"),
        "guard": _GUARD_PATTERN,
        "constructor": re.compile(
            r"const\s+llm\s*=\s*new\s+Chat\w+\s*\(\s*{\s*model\s*:\s*[\"'][^\"']+[\"']\s*}\s*\);"
        ),
    },
    AgentFramework.VERCEL_AI_SDK: {
        "import": re.compile(r"import\s+{\s*\w+\s*}\s+from\s+[\"']@ai-sdk/\w+[\"'];"),
        "guard": _GUARD_PATTERN,
        "constructor": re.compile(r"const\s+model\s*=\s*\w+\s*\(\s*[\"'][^\"']+[\"']\s*\);"),
    },
}

_REWRITES: Mapping[AgentFramework, Mapping[ModelProvider, ProviderRewrite]] = {
    AgentFramework.LANGCHAIN: {
        ModelProvider.OPENAI: ProviderRewrite(
            import_line='import { ChatOpenAI } from "@langchain/openai";',
            env_key="OPENAI_API_KEY",
            constructor='const llm = new ChatOpenAI({ model: "gpt-4o-mini" });',
        ),
        ModelProvider.GEMINI: ProviderRewrite(
            import_line='import { ChatGoogleGenerativeAI } from "@langchain/google-genai";',
            env_key="GEMINI_API_KEY",
            constructor='const llm = new ChatGoogleGenerativeAI({ model: "gemini-pro" });',
        ),
        ModelProvider.ANTHROPIC: ProviderRewrite(
            import_line='import { ChatAnthropic } from "@langchain/anthropic";',
            env_key="ANTHROPIC_API_KEY",
            constructor='const llm = new ChatAnthropic({ model: "claude-3-5-sonnet-20241022" });',
        ),
    },
    AgentFramework.VERCEL_AI_SDK: {
        ModelProvider.OPENAI: ProviderRewrite(
            import_line='import { openai } from "@ai-sdk/openai";',
            env_key="OPENAI_API_KEY",
            constructor='const model = openai("gpt-4o-mini");',
        ),
        ModelProvider.GEMINI: ProviderRewrite(
            import_line='import { google } from "@ai-sdk/google";',
            env_key="GOOGLE_GENERATIVE_AI_API_KEY",
            constructor='const model = google("gemini-pro");',
        ),
        ModelProvider.ANTHROPIC: ProviderRewrite(
            import_line='import { anthropic } from "@ai-sdk/anthropic";',
            env_key="ANTHROPIC_API_KEY",
            constructor='const model = anthropic("claude-3-5-sonnet-20241022");',
        ),
    },
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def detect_framework(source: str) -> Optional[AgentFramework]:
    """Return the framework whose import signature appears in *source*."""
    for framework, signature in _SIGNATURES:
        if signature in source:
            return framework
    return None


def get_provider_rewrite(
    framework: AgentFramework, model_provider: Optional[str] = None
) -> ProviderRewrite:
    """Return the replacement blocks, falling back to OpenAI."""
    member = coerce_enum(ModelProvider, model_provider) or ModelProvider.OPENAI
    return _REWRITES[framework][member]


def apply_model_provider_rewrites(
    source: str, model_provider: Optional[str] = None
) -> RewriteResult:
    """Rewrite *source* for *model_provider* and report what matched.

    Sources without a known framework signature are returned unchanged with
    ``framework=None``.
    """
    framework = detect_framework(source)
    if framework is None:
        return RewriteResult(text=source)

    rewrite = get_provider_rewrite(framework, model_provider)
    replacements = {
        "import": rewrite.import_line,
        "guard": rewrite.guard,
        "constructor": rewrite.constructor,
    }

    result = RewriteResult(text=source, framework=framework)
    for name, pattern in _PATTERNS[framework].items():
        replacement = replacements[name]
        text, count = pattern.subn(lambda _match: replacement, result.text, count=1)
        if count:
            result.text = text
            result.applied.append(name)
        else:
            result.missed.append(name)
    return result


def rewrite_model_provider(source: str, model_provider: Optional[str] = None) -> str:
    """Return *source* rewritten for *model_provider*."""
    return apply_model_provider_rewrites(source, model_provider).text


async def rewrite_file(path: str | Path, model_provider: Optional[str] = None) -> RewriteResult:
    """Rewrite the agent source at *path* in place."""
    file_path = Path(path)
    source = file_path.read_text(encoding="utf-8")
    result = apply_model_provider_rewrites(source, model_provider)
    if result.text != source:
        await write_text(file_path, result.text)
    return result
