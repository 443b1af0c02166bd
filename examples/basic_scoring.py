"""
Basic LingoPause usage example.

Scores a few spoken answers against a reference sentence.
"""

from lingopause import compare

def main():
    reference = "Este es un segmento de transcripción de respaldo."
    answers = [
        "este es un segmento de transcripción de respaldo.",
        "este es un segmento de transcripcion",
        "es un momento",
    ]

    for answer in answers:
        result = compare(reference, answer)
        print(f"You said: \"{answer}\"")
        print(f"Similarity: {result.score_percent:.1f}% ({result.grade})\n")

if __name__ == "__main__":
    main()
