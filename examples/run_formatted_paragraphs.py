"""
Tiny helper script showing process_with_formatting on styled paragraphs.
"""

from __future__ import annotations

from ru_typograph import FormattedParagraph, FormattedRun, process_with_formatting
from ru_typograph.samples import EXAMPLE_POEM


def main() -> None:
    documents = {
        "prose": [
            FormattedParagraph(
                runs=[
                    FormattedRun("Он сказал", {"bold": True}),
                    FormattedRun(" - в 1966-1977 годах...", {}),
                ]
            )
        ],
        "poetry": [
            FormattedParagraph(runs=[FormattedRun(line)])
            for line in EXAMPLE_POEM.split("\n")
        ],
    }

    for name, paragraphs in documents.items():
        print("-" * 40)
        print(name)
        for paragraph in process_with_formatting(paragraphs):
            runs = " | ".join(repr(run.text) for run in paragraph.runs)
            print(f"[{paragraph.style}] {runs}")


if __name__ == "__main__":
    main()
