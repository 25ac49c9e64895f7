"""
Prompt building for document translation.

The instruction template and glossary are fixed so that repeated runs over the
same document produce stable translations.
"""

from __future__ import annotations

from docs_prebuild.config import LanguageConfig

SYSTEM_PROMPT = (
    "You are a professional technical documentation translator. Translate accurately "
    "while preserving Markdown formatting, code blocks, and technical terms."
)

# Proper nouns that must survive translation verbatim
PROTECTED_TERMS: tuple[str, ...] = ("New API", "Cherry Studio")

GLOSSARY = """
| 中文 | English | 说明 | Description |
|------|---------|------|-------------|
| 倍率 | Ratio | 用于计算价格的乘数因子 | Multiplier factor used for price calculation |
| 令牌 | Token | API访问凭证，也指模型处理的文本单元 | API access credentials or text units processed by models |
| 渠道 | Channel | API服务提供商的接入通道 | Access channel for API service providers |
| 分组 | Group | 用户或令牌的分类，影响价格倍率 | Classification of users or tokens, affecting price ratios |
| 额度 | Quota | 用户可用的服务额度 | Available service quota for users |
"""


def _base_rules() -> str:
    protected = "、".join(f'"{term}"' for term in PROTECTED_TERMS)
    return f"""
翻译要求：
1. 保持 Markdown 格式完整，包括标题、列表、代码块、链接等
2. 代码块内容不要翻译
3. 专业术语使用行业标准翻译
4. 保持技术准确性和专业性
5. 图片路径、链接路径保持不变（如果路径中包含中文目录，保持原样）
6. Front matter (YAML 头部) 中的内容需要翻译
7. 保持原文的语气和风格
8. 对于特殊的专有名词（如产品名 {protected} 等），保持不变"""


def build_translation_prompt(
    content: str,
    language: LanguageConfig,
    source_dir: str = "zh",
) -> str:
    """
    Build the user prompt for translating one document.

    Args:
        content: Full source document text.
        language: Target language.
        source_dir: Path segment of the source language, rewritten in links.

    Returns:
        Complete prompt string for the LLM.
    """
    return f"""你是一个专业的技术文档翻译专家。请将以下 Markdown 格式的技术文档从中文翻译为{language.native_name}。
{_base_rules()}
9. 路径中的语言代码需要替换：将 /{source_dir}/ 替换为 /{language.dir}/（例如：href="/{source_dir}/docs/guide" → href="/{language.dir}/docs/guide"）

术语表（不要放在翻译内容中）：
{GLOSSARY}

请直接返回翻译后的内容，不要添加任何解释或说明。

原文：

{content}
"""
