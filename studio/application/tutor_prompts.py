"""
Name: Reading Tutor Prompt Builders

Responsibilities:
  - Build grading, re-grading, ideal-summary and Q&A prompts
  - Reuse the packaged tutor role and grading rubric fragments
  - Render previous attempts and conversation history as markdown

Collaborators:
  - infrastructure.prompts.PromptLibrary (fragment source)
  - domain.entities.PreviousAttempt / ConversationMessage

Notes:
  - Sections are joined with single newlines; fragments keep a blank line
    on each side so headings stay separated
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.entities import ConversationMessage, PreviousAttempt

EXTENDED_TEXT_SUFFIX = (
    "CRITICAL: Generate the COMPLETE ideal summary now. Do not stop until fully complete. "
    "Include ALL key concepts and examples. DO NOT TRUNCATE."
)

NO_CONVERSATION = "No previous conversation."


class FragmentSource(Protocol):
    def fragment(self, capability: str, name: str) -> str: ...


def _format_score(score: float) -> str:
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def render_previous_attempts(attempts: Sequence[PreviousAttempt]) -> str:
    return "\n".join(
        f"\n### Attempt {index} (Score: {_format_score(attempt.score)}/100)\n\n"
        f"**Notes:**\n{attempt.notes}\n\n"
        f"**Previous Feedback:**\n{attempt.feedback}\n"
        for index, attempt in enumerate(attempts, start=1)
    )


def render_user_attempts(attempts: Sequence[str]) -> list[str]:
    return [f"### Attempt {index}\n{notes}\n" for index, notes in enumerate(attempts, start=1)]


def render_history(history: Sequence[ConversationMessage]) -> str:
    if not history:
        return NO_CONVERSATION
    return "\n\n".join(
        f"**{'Student' if message.role == 'user' else 'Tutor'}:** {message.content}"
        for message in history
    )


class TutorPrompts:
    """
    R: Prompt builders for the reading tutor.

    Args:
        fragments: Anything exposing fragment(capability, name) -> str
    """

    CAPABILITY = "tutor"

    def __init__(self, fragments: FragmentSource):
        self._fragments = fragments

    @property
    def role(self) -> str:
        return "\n" + self._fragments.fragment(self.CAPABILITY, "role") + "\n"

    @property
    def rubric(self) -> str:
        return "\n" + self._fragments.fragment(self.CAPABILITY, "rubric") + "\n"

    def build_analysis_prompt(self, chapter_text: str, user_notes: str) -> str:
        return "\n".join(
            [
                self.role,
                "## Your Task",
                "Evaluate the user's chapter summary based on the grading rubric below. "
                "Be specific and actionable in your feedback.",
                "",
                self.rubric,
                "",
                "## Original Chapter",
                chapter_text,
                "",
                "## User's Summary",
                user_notes,
                "",
                "## Evaluation Guidelines",
                "### When Identifying Strengths:",
                "- Point to SPECIFIC elements the user included correctly",
                "- Acknowledge good understanding of concepts",
                "- Note effective use of examples or clear explanations",
                "",
                "### When Identifying Areas for Improvement:",
                "- Be SPECIFIC about what's missing or unclear",
                "- Focus on CONCEPTUAL gaps, not trivial details",
                "- Suggest concrete additions or clarifications needed",
                "- Prioritize improvements that would most enhance understanding",
                "",
                "### What Makes a Good Summary:",
                "- Captures the core theme and main concepts",
                "- Explains WHY concepts matter, not just what they are",
                "- Uses concrete examples to illustrate abstract ideas",
                "- Shows connections between concepts",
                "- Demonstrates understanding in own words",
                "",
                "### Avoid Suggesting Improvements For:",
                "- Historical trivia (names, dates) unless central",
                "- Minor details that don't affect core understanding",
                "- Style preferences if the content is clear",
                "",
                "## Instructions",
                "1. Calculate a score (0-100) based on the rubric",
                "2. Provide specific, actionable feedback with examples",
                "3. List 2-3 concrete strengths (reference specific parts of their summary)",
                "4. List 2-4 specific areas for improvement (explain what to add/clarify)",
                "5. Be encouraging while being honest about conceptual gaps",
                "6. Focus feedback on understanding, not memorization",
            ]
        )

    def build_reanalysis_prompt(
        self,
        chapter_text: str,
        user_notes: str,
        previous_attempts: Sequence[PreviousAttempt],
    ) -> str:
        return "\n".join(
            [
                self.role,
                "## Your Task",
                "Re-evaluate the user's improved chapter summary, considering their "
                "previous attempts and your earlier feedback.",
                "",
                self.rubric,
                "",
                "## Original Chapter",
                chapter_text,
                "",
                "## Previous Attempts",
                render_previous_attempts(previous_attempts),
                "",
                "## Current Summary (Latest Attempt)",
                user_notes,
                "",
                "## Instructions",
                "1. Calculate a new score (0-100) based on the rubric",
                "2. Note specific improvements from previous attempts",
                "3. Provide feedback on what's better and what still needs work",
                "4. List current strengths",
                "5. List remaining areas for improvement",
                "6. Add a progress note comparing this attempt to previous ones",
            ]
        )

    def build_ideal_summary_prompt_concise(
        self, chapter_text: str, user_attempts: Sequence[str]
    ) -> str:
        """R: Bullet-point example summary limited to the essential concepts."""
        return "\n".join(
            [
                self.role,
                "## Your Task",
                "Create a BRIEF, CONCISE bullet-point summary capturing ONLY the "
                "essential concepts. Be extremely concise.",
                "",
                "## STRICT Format Requirements",
                "- Maximum 10-12 total bullet points (including sub-bullets)",
                "- Each bullet: ONE SHORT SENTENCE (max 15-20 words)",
                "- Use simple dash bullets (- )",
                "- 3-4 main concepts maximum",
                "- 1-2 sub-bullets per concept (only if essential)",
                "",
                "## Writing Style",
                "- BE CONCISE: Every word must be essential",
                "- NO verbose explanations or long sentences",
                "- Focus on WHAT and WHY, skip HOW unless critical",
                "- Use simple, clear language",
                "",
                "## Content Template",
                "```markdown",
                "- **Core Theme**: [One sentence, max 20 words]",
                "",
                "- **Key Concept 1**: [Brief definition, max 15 words]",
                "  - Why: [One key reason, max 10 words]",
                "  - Example: [Only if needed, max 10 words]",
                "",
                "- **Key Concept 2**: [Brief definition, max 15 words]",
                "  - Key insight: [One crucial point, max 10 words]",
                "",
                "- **Key Concept 3**: [Brief definition, max 15 words]",
                "  - Application: [One practical use, max 10 words]",
                "```",
                "",
                "## Examples of Good Conciseness",
                'GOOD: "Morse code uses two states (dot/dash) to encode letters"',
                'BAD: "Morse code offers an efficient and adaptable solution by using a '
                'two-state system of short and long signals (dots and dashes)"',
                "",
                'GOOD: "Binary systems create many combinations from two elements"',
                'BAD: "The fundamental principle of using two distinct states or elements '
                'is powerful enough to encode vast amounts of information"',
                "",
                "## What to EXCLUDE",
                "- Historical details (names, dates)",
                "- Step-by-step explanations",
                "- Multiple examples per concept",
                "- Elaborate descriptions",
                "- Redundant information",
                "",
                "## Original Chapter",
                chapter_text,
                "",
                "## User's Attempts (for context)",
                *render_user_attempts(user_attempts),
                "",
                "## Final Reminders",
                "1. BREVITY is key - aim for minimal word count",
                "2. Complete thoughts but SHORT sentences",
                "3. Only the MOST essential information",
                "4. If it's not crucial, leave it out",
                '5. Think "tweet-length" bullets, not paragraphs',
            ]
        )

    def build_ideal_summary_prompt_extended(
        self, chapter_text: str, user_attempts: Sequence[str]
    ) -> str:
        """R: Full example summary covering every concept with examples and connections."""
        return "\n".join(
            [
                self.role,
                "## Your Task",
                "Create a COMPLETE, COMPREHENSIVE chapter summary. You MUST finish the "
                "entire summary - do not stop partway through.",
                "",
                "## Format Requirements",
                "- Use markdown bullet points (- ) and bold headings (**Concept Name**)",
                "- Each bullet is one complete sentence or thought",
                "- Use 2-space indentation for sub-bullets",
                "- Add blank lines between concepts for readability",
                "",
                "## Structure (Complete ALL sections)",
                "1. **Chapter Core Theme**: 1-2 paragraph synthesis",
                "2. **Key Concepts**: Cover ALL major ideas (typically 3-6 concepts)",
                "3. For EACH concept include:",
                "   - Clear definition/explanation",
                "   - Why it matters",
                "   - How it works (when relevant)",
                "   - 2-3 concrete examples",
                "   - Connections to other concepts",
                "",
                "## Example Quality Guidelines",
                "**High-Value Examples**:",
                "- Mathematical demonstrations: '2^4 = 16 possible codes with 4 elements'",
                "- Practical analogies: 'Like a decision tree where each branch doubles possibilities'",
                "- Real applications: 'Modern computers use this binary principle in all operations'",
                "- Pattern illustrations: 'Each table has 2x the codes of the previous: 2, 4, 8, 16'",
                "",
                "**Low-Value Examples** (avoid unless central to understanding):",
                "- Historical trivia: Names, dates, biographical details",
                "- Redundant restatements: Saying the same thing differently",
                "- Peripheral details: Information not core to the concept",
                "",
                "## Example Structure",
                "```markdown",
                "**Chapter Core Theme**",
                "",
                "[1-2 paragraph explanation of the chapter's central message and how all "
                "concepts connect to it]",
                "",
                "**Key Concept 1: [Concept Name]**",
                "",
                "- **Definition**: [Clear explanation in own words]",
                "- **Why it matters**: [Significance]",
                "- **How it works**: [Mechanism if relevant]",
                "- **Example 1**: [Concrete example from text]",
                "- **Example 2**: [Own analogy or real-world case]",
                "- **Connects to**: [How it relates to other concepts]",
                "",
                "**Key Concept 2: [Concept Name]**",
                "",
                "- **Definition**: [Clear explanation]",
                "- **Core principle**: [Fundamental rule]",
                "- **Mathematical pattern**: [Formula if applicable]",
                "- **Demonstration**: [Step-by-step example]",
                "- **Application**: [Practical use]",
                "",
                "[Repeat for ALL remaining concepts - do not stop early]",
                "```",
                "",
                self.rubric,
                "",
                "## Original Chapter",
                chapter_text,
                "",
                "## User's Attempts (for context - identify what they missed)",
                *render_user_attempts(user_attempts),
                "",
                "## Critical Requirements",
                "1. **FINISH THE ENTIRE SUMMARY** - Cover all concepts completely",
                "2. **NO STOPPING EARLY** - If you start a concept, finish it fully",
                "3. Focus on WHY and HOW, not just WHAT",
                "4. Use concrete examples that clarify abstract ideas",
                "5. Avoid historical trivia unless it's central to understanding",
                "6. Address what the user missed in their attempts",
                "7. Quality examples > quantity of examples",
            ]
        )

    def build_extended_text_prompt(
        self, chapter_text: str, user_attempts: Sequence[str]
    ) -> str:
        prompt = self.build_ideal_summary_prompt_extended(chapter_text, user_attempts)
        return f"{prompt}\n\n{EXTENDED_TEXT_SUFFIX}"

    def build_conversation_prompt(
        self,
        chapter_text: str,
        user_notes: str,
        history: Sequence[ConversationMessage],
        question: str,
    ) -> str:
        return "\n".join(
            [
                self.role,
                "## Context",
                "The user is working on improving their chapter summary and has questions for you.",
                "",
                "## Original Chapter",
                chapter_text,
                "",
                "## User's Current Summary",
                user_notes,
                "",
                "## Conversation History",
                render_history(history),
                "",
                "## Current Question",
                question,
                "",
                "## Instructions",
                "1. Answer the question thoughtfully and pedagogically",
                "2. Use Socratic questioning when appropriate to deepen understanding",
                "3. Reference specific parts of the chapter or their notes",
                "4. Encourage critical thinking rather than just providing answers",
                "5. Be conversational and supportive",
            ]
        )
