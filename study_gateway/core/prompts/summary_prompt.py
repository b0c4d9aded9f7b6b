"""
Summary, merge, edit and title prompts.

The comprehensive detail level asks for a full structural rewrite with
definition blocks and preserved equations; concise and standard ask for a
bounded summary. Every summary prompt carries a word range scaled to the
input size.

Dependencies: langchain_core.prompts, study_gateway.core.prompts
System role: Prompt templates for the chunked-summary orchestrator
"""

from langchain_core.prompts import ChatPromptTemplate

from study_gateway.core.prompts.languages import get_language_name, language_instruction
from study_gateway.core.prompts.length_targets import LengthTarget
from study_gateway.core.prompts.renderer import render_messages
from study_gateway.models.chat import ChatMessage
from study_gateway.models.generation import DocumentRef
from study_gateway.models.study_content import DetailLevel

MAX_MANIFEST_DOCUMENTS = 6

_ACCURACY_RULES = """CRITICAL REQUIREMENTS FOR CONTENT ACCURACY:
1. Cover EVERYTHING in the source - do NOT pick just one topic and write about it
2. Cover ALL topics, points, and concepts mentioned in the source material
3. If the source is very short, keep the output proportionally short - do NOT expand or make up content
4. ONLY include information that is actually present in the source material - do NOT invent content
5. If multiple topics are mentioned, cover ALL of them, not just one"""

_FORMATTING_RULES = """- Use proper HTML tags (p, h2, h3, h4, ul, ol, li, strong, em, blockquote, mark, etc.)
- Use <strong> tags for bold emphasis on important terms
- Use <mark> tags to highlight key points, NOT <strong> tags"""

COMPREHENSIVE_SYSTEM_PROMPT = f"""You are an expert educational content writer. Your task is to REWRITE and RESTRUCTURE the provided content in a more organized, detailed, and comprehensive way. This is NOT a summary - cover EVERYTHING from the original content, but present it better structured and explained.{{language_instruction}}

{_ACCURACY_RULES}

STRUCTURE REQUIREMENTS:
- Use headings (h2, h3, h4) to organize content into clear sections and subsections
- For EVERY major concept or term, include a definition block using <blockquote> tags
- Format definitions like this: <blockquote><strong>Term:</strong> Detailed definition and explanation</blockquote>
- Include ALL mathematical equations from the original content
- Format equations using LaTeX: inline equations with $...$ and block equations with $$...$$
- Preserve and expand on ALL examples, explanations, and context
{_FORMATTING_RULES}

LENGTH REQUIREMENTS:
- The length should scale with the original content
- Completeness is more important than brevity
- Include enough detail that the user can learn from your rewrite alone

Return ONLY valid HTML, no markdown or code fences."""

SUMMARY_SYSTEM_PROMPT = f"""You are an expert educational content summarizer. Create a {{style}} summary in HTML format.{{language_instruction}}

{_ACCURACY_RULES}

Requirements:
- Structure the summary with clear sections and subsections
- Include key concepts, main points, and important details
- Use headings (h2, h3, h4) to organize content logically with clear hierarchy
{_FORMATTING_RULES}
- Return ONLY valid HTML, no markdown or code fences"""

COMPREHENSIVE_TASK_INSTRUCTIONS = """

CRITICAL INSTRUCTIONS - THIS IS A REWRITE, NOT A SUMMARY:
- Cover EVERY aspect of the content in detail - nothing should be left out
- The original content appears to have approximately {slides} slides worth of material
- Explain concepts thoroughly so the user can understand without the original
- Include definition blocks for ALL major terms using <blockquote><strong>Term:</strong> ...</blockquote>
- Include ALL mathematical equations using LaTeX ($...$ inline, $$...$$ block)
- Preserve ALL examples, case studies, formulas, theorems and proofs"""

SUMMARY_USER_TEMPLATE = """{task} the following content in HTML format.{task_instructions}

CRITICAL: Cover EVERYTHING mentioned in the source material. If multiple things are discussed, include ALL of them.

Content:
{content}

{documents}{part}

Target length: {min_words}-{max_words} words (scaled based on content length: approximately {slides} slides).
Return ONLY valid HTML content, no markdown or code fences."""

SUMMARY_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    ("human", SUMMARY_USER_TEMPLATE),
])

MERGE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    ("human", """Merge the following partial {kind} into a single, coherent {target} in HTML format.{language_instruction}

Partial {kind_title}:
{parts}

Requirements:
- Combine all parts into a unified {unit}
- {redundancy_rule}
- Maintain logical flow and structure with clear sections
- Use proper HTML formatting (h2, h3, h4, p, ul, ol, li, strong, em, blockquote, mark)
- Target length: {min_words}-{max_words} words (scaled based on content length)
- Return ONLY valid HTML content, no markdown or code fences."""),
])

EDIT_SUMMARY_PROMPT = ChatPromptTemplate.from_messages([
    ("system", """You are an expert educational content editor. Modify an existing summary based on user instructions while keeping its overall structure and quality.{language_instruction}

CRITICAL REQUIREMENTS:
- Preserve the HTML formatting and structure of the original summary
- Only make the specific changes requested by the user
- Keep all other content unchanged unless explicitly requested
- For mathematical content, use LaTeX: inline equations with $...$ and block equations with $$...$$

Return ONLY the modified HTML summary, no explanations or additional text."""),
    ("human", """Current Summary:
{summary}

User Instruction: {instruction}

Modify the summary according to the instruction above. Return the complete modified summary in HTML format."""),
])

TITLE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", """You are an expert copywriter. Create a short, keyword-focused title from provided content.{language_instruction}
Rules:
- 2-4 words MAXIMUM, Title Case
- Extract ONLY the essential keywords that define the core topic
- No quotes, no punctuation at end
- Must fit in a mobile navigation bar (max 35 characters)
- Prefer content keywords over filenames if they conflict
- Examples: "Machine Learning Basics", "Quantum Physics", "World War II\""""),
    ("human", """Content:
{content}

Documents: {documents}

Extract the 2-4 most important keywords that define this content. Return ONLY the title (2-4 words max)."""),
])


def format_document_manifest(documents: list[DocumentRef] | None) -> str:
    """First six documents as "name [type]", comma separated; empty when none."""
    return ", ".join(
        f"{document.name} [{document.type}]"
        for document in (documents or [])[:MAX_MANIFEST_DOCUMENTS]
    )


def summary_system_prompt(detail_level: DetailLevel, language: str = "en") -> str:
    """System prompt for a summary call; comprehensive asks for a rewrite."""
    instruction = language_instruction(language)
    if detail_level == DetailLevel.COMPREHENSIVE:
        return COMPREHENSIVE_SYSTEM_PROMPT.format(language_instruction=instruction)
    style = "brief and focused" if detail_level == DetailLevel.CONCISE else "balanced and informative"
    return SUMMARY_SYSTEM_PROMPT.format(style=style, language_instruction=instruction)


def build_summary_messages(
    content: str,
    detail_level: DetailLevel,
    target: LengthTarget,
    documents: list[DocumentRef] | None = None,
    language: str = "en",
    part: tuple[int, int] | None = None,
) -> list[ChatMessage]:
    """
    Messages for one summary call (single pass or one chunk).

    Args:
        content: Text to summarize
        detail_level: Requested depth
        target: Word range for the output
        documents: Attached documents for the manifest line
        language: ISO code of the content
        part: (index, total) when content is one chunk of several, 1-based

    Returns:
        list[ChatMessage]: System and user messages
    """
    comprehensive = detail_level == DetailLevel.COMPREHENSIVE
    manifest = format_document_manifest(documents)
    part_text = ""
    if part is not None:
        index, total = part
        part_text = (
            f"\n\nThis is part {index} of {total} parts. "
            "Focus on this section while maintaining context."
        )

    return render_messages(
        SUMMARY_PROMPT,
        system_prompt=summary_system_prompt(detail_level, language),
        task="REWRITE and RESTRUCTURE" if comprehensive else f"Create a {detail_level.value} summary of",
        task_instructions=(
            COMPREHENSIVE_TASK_INSTRUCTIONS.format(slides=target.estimated_slides)
            if comprehensive
            else ""
        ),
        content=content,
        documents=f"Documents: {manifest}" if manifest else "No additional documents",
        part=part_text,
        min_words=target.min_words,
        max_words=target.max_words,
        slides=target.estimated_slides,
    )


def build_merge_messages(
    partial_summaries: list[str],
    detail_level: DetailLevel,
    target: LengthTarget,
    language: str = "en",
) -> list[ChatMessage]:
    """Messages for the merge call combining partial summaries."""
    comprehensive = detail_level == DetailLevel.COMPREHENSIVE
    parts = "\n\n".join(
        f"Part {index}:\n{summary}"
        for index, summary in enumerate(partial_summaries, start=1)
    )
    merge_language = ""
    if language and language.lower() != "en":
        merge_language = (
            f"\n\nIMPORTANT: Generate your response in {get_language_name(language)}. "
            "Keep the same language as the partial summaries."
        )

    return render_messages(
        MERGE_PROMPT,
        system_prompt=summary_system_prompt(detail_level, language),
        kind="rewrites" if comprehensive else "summaries",
        kind_title="Rewrites" if comprehensive else "Summaries",
        target="highly detailed and comprehensive rewrite" if comprehensive else "comprehensive summary",
        unit="rewrite" if comprehensive else "summary",
        redundancy_rule=(
            "Preserve ALL details, definition blocks and equations from all parts - do not omit information"
            if comprehensive
            else "Remove redundancy and overlap while preserving important details"
        ),
        language_instruction=merge_language,
        parts=parts,
        min_words=target.min_words,
        max_words=target.max_words,
    )


def build_edit_messages(summary: str, instruction: str, language: str = "en") -> list[ChatMessage]:
    """Messages for revising an existing summary."""
    return render_messages(
        EDIT_SUMMARY_PROMPT,
        summary=summary,
        instruction=instruction,
        language_instruction=language_instruction(language, "the modified summary"),
    )


def build_title_messages(
    content: str,
    documents: list[DocumentRef] | None = None,
    language: str = "en",
) -> list[ChatMessage]:
    """Messages for a short note title."""
    return render_messages(
        TITLE_PROMPT,
        content=content,
        documents=format_document_manifest(documents) or "none",
        language_instruction=language_instruction(language, "the title"),
    )
