"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

import time
from typing import List, Optional, Sequence, Tuple

import gradio as gr

from rhyme_scout.core.categories import ALL_CATEGORIES
from rhyme_scout.core.strength import score_rhyme_breakdown, strength_label
from rhyme_scout.core.stress import estimate_stress, primary_stress_index

from ..services.search_service import RhymeSearchService

ALL_SYLLABLES = "All"
_SYLLABLE_CHOICES = [ALL_SYLLABLES] + [str(count) for count in range(1, 9)]
_CATEGORY_CHOICES = [(category.heading, category.value) for category in ALL_CATEGORIES]
_DEFAULT_RESULTS_MESSAGE = "Start by entering a word and click **Find Rhymes**."


def _parse_syllable_choice(choice: Optional[str]) -> Optional[int]:
    if choice in (None, "", ALL_SYLLABLES):
        return None
    try:
        value = int(choice)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def format_history(history: Sequence[str]) -> str:
    if not history:
        return "_No searches yet._"
    return "**Recent searches:** " + ", ".join(f"`{word}`" for word in history)


def run_search(
    service: RhymeSearchService,
    word: str,
    categories: Optional[Sequence[str]] = None,
    syllable_choice: Optional[str] = ALL_SYLLABLES,
    max_results: float = 100,
    show_strength: bool = True,
) -> Tuple[str, str, str]:
    """Execute one search and return ``(status, results, history)`` markdown."""

    if not word or not word.strip():
        return (
            "Please enter a word to find rhymes for.",
            _DEFAULT_RESULTS_MESSAGE,
            format_history(service.history),
        )

    start = time.perf_counter()
    try:
        results = service.search(
            word,
            categories=list(categories or []) or None,
            syllables=_parse_syllable_choice(syllable_choice),
            max_results=int(max_results),
        )
    except Exception as exc:  # pragma: no cover - surface UI level failures
        return (
            f"Search failed: {exc}",
            _DEFAULT_RESULTS_MESSAGE,
            format_history(service.history),
        )

    elapsed = time.perf_counter() - start
    status = f"Found {results.total} words in {elapsed:.2f}s"
    counts = results.syllable_counts()
    if counts:
        status += " | syllable counts: " + ", ".join(str(count) for count in counts)
    return (
        status,
        service.format_results(results, show_strength=bool(show_strength)),
        format_history(service.history),
    )


def analyze_word(word: str, syllables: Optional[float] = None) -> str:
    """Describe the estimated stress of ``word`` as markdown."""

    text = (word or "").strip()
    if not text:
        return "Please enter a word to analyse."
    estimate = estimate_stress(text, syllables or None)
    stressed = primary_stress_index(estimate.pattern)
    return "\n".join(
        [
            f"**{text}**",
            f"- Syllables: {estimate.syllable_count}",
            f"- Stress: `{estimate.display}`",
            f"- Primary stress: syllable {stressed + 1 if stressed is not None else '?'}",
            f"- Breakdown: {' · '.join(estimate.breakdown)}",
        ]
    )


def compare_words(word: str, candidate: str, api_score: float = 0.0) -> str:
    """Explain the rhyme strength between two words as markdown."""

    if not (word or "").strip() or not (candidate or "").strip():
        return "Please enter both words to compare."
    breakdown = score_rhyme_breakdown(word.strip(), candidate.strip(), api_score)
    lines: List[str] = [
        f"**{word.strip()}** / **{candidate.strip()}**: "
        f"{strength_label(breakdown.total)} ({breakdown.total}%)"
    ]
    if breakdown.exact_match:
        lines.append("- Identical words")
    else:
        lines.extend(
            [
                f"- API relevance: {breakdown.api}",
                f"- Shared ending: {breakdown.suffix}",
                f"- Vowel match: {breakdown.vowel}",
                f"- Final consonants: {breakdown.consonant}",
            ]
        )
    return "\n".join(lines)


def create_interface(search_service: RhymeSearchService) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    def search_interface(word, categories, syllable_choice, max_results, show_strength):
        return run_search(
            search_service,
            word,
            categories=categories,
            syllable_choice=syllable_choice,
            max_results=max_results,
            show_strength=show_strength,
        )

    with gr.Blocks(title="Rhyme Scout") as interface:
        gr.Markdown(
            "<h2>🎵 Rhyme Scout</h2>\n"
            "<p>Rhymes, near rhymes, sound-alikes and related words with stress patterns.</p>"
        )
        gr.Markdown(
            "**Rhyme strength:** 0–100 blend of the API relevance score and shared spelling "
            "(ending, vowels, final consonants).\n"
            "**Stress:** `STR` marks the syllable most likely to carry the emphasis."
        )

        with gr.Tabs():
            with gr.Tab("Find Rhymes"):
                with gr.Row():
                    with gr.Column(scale=1, min_width=240):
                        word_input = gr.Textbox(
                            label="Word",
                            placeholder="Enter a word (e.g., love, mind, flow)",
                            lines=1,
                        )
                        category_input = gr.CheckboxGroup(
                            choices=_CATEGORY_CHOICES,
                            value=[category.value for category in ALL_CATEGORIES],
                            label="Categories",
                        )
                        syllable_input = gr.Dropdown(
                            choices=_SYLLABLE_CHOICES,
                            value=ALL_SYLLABLES,
                            label="Filter by Syllables",
                        )
                        max_results = gr.Slider(
                            minimum=10,
                            maximum=1000,
                            value=search_service.max_results,
                            step=10,
                            label="Max Results per Category",
                        )
                        show_strength = gr.Checkbox(value=True, label="Show Rhyme Strength")
                        search_btn = gr.Button("🔍 Find Rhymes", variant="primary")
                        history_md = gr.Markdown(value=format_history(search_service.history))

                    with gr.Column(scale=2):
                        status_md = gr.Markdown(value="Waiting to start a search…")
                        results_md = gr.Markdown(value=_DEFAULT_RESULTS_MESSAGE)

            with gr.Tab("Analyse"):
                with gr.Row():
                    with gr.Column():
                        analyse_word = gr.Textbox(label="Word", lines=1)
                        analyse_syllables = gr.Number(label="Known syllables (optional)", precision=0)
                        analyse_btn = gr.Button("Estimate stress")
                        analyse_md = gr.Markdown()
                    with gr.Column():
                        compare_a = gr.Textbox(label="Word", lines=1)
                        compare_b = gr.Textbox(label="Candidate", lines=1)
                        compare_score = gr.Number(label="API score", value=0)
                        compare_btn = gr.Button("Score rhyme")
                        compare_md = gr.Markdown()

        search_inputs = [word_input, category_input, syllable_input, max_results, show_strength]
        search_outputs = [status_md, results_md, history_md]
        search_btn.click(fn=search_interface, inputs=search_inputs, outputs=search_outputs)
        word_input.submit(fn=search_interface, inputs=search_inputs, outputs=search_outputs)

        analyse_btn.click(analyze_word, [analyse_word, analyse_syllables], [analyse_md])
        compare_btn.click(compare_words, [compare_a, compare_b, compare_score], [compare_md])

    return interface


__all__ = ["analyze_word", "compare_words", "create_interface", "format_history", "run_search"]
