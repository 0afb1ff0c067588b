import sys, os
# Ensure project root is on sys.path when running as a script
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
from core.aligner import align
from core.difficulty import difficulty_level, score_difficulty
from core.grammar import identify_grammar_points
from models.request import AlignmentOptions, FallbackStrategy


def main() -> None:
    # Mock bilingual lesson text
    english_text = (
        "Oranges grow on trees. Each orange has many seeds inside. "
        "Farmers send the oranges to a place where juice is made. "
        "Have you ever tasted fresh orange juice?"
    )
    chinese_text = "橙子长在树上。每个橙子里面都有很多种子。农民把橙子送到制作果汁的地方。"

    options = AlignmentOptions(
        min_confidence=0.0,
        fallback_strategy=FallbackStrategy.PLACEHOLDER,
    )
    pairs = align(english_text, chinese_text, options)

    # Print for inspection
    print("=== SENTENCE PAIRS ===")
    for pair in pairs:
        score = score_difficulty(pair.english)
        print(f"[{pair.confidence:.2f}] {pair.english}")
        print(f"       {pair.chinese}")
        print(f"       difficulty={score} ({difficulty_level(score)}) grammar={identify_grammar_points(pair.english)}")


if __name__ == "__main__":
    sys.exit(main())
