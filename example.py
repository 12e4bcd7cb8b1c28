"""
Example script demonstrating the QuizDeck workflow.
Replays a key sequence against the bundled deck without opening a window.
"""

from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from quizdeck.core import (
    AudioCue,
    InputRouter,
    LoadError,
    SlideNavigator,
    SlideStore,
)
from quizdeck.utils import Config, format_key


class PrintingAudioCue(AudioCue):
    """Prints cues instead of playing them."""

    def play(self, asset_name: str) -> None:
        print(f"   🔔 cue: {asset_name}")


def main():
    """Run example QuizDeck workflow."""

    print("🃏 QuizDeck Example Workflow\n")

    # Step 1: Load slides
    print("1️⃣ Loading slides...")
    try:
        deck = SlideStore(Config.SLIDES_FILE).load()
    except LoadError as e:
        print(f"❌ {e}")
        return
    print(f"✅ Loaded {len(deck.main)} main and {len(deck.special)} special slides\n")

    for i, slide in enumerate(deck.main, 1):
        print(f"   Slide {i}: {slide.question}")
    print()

    # Step 2: Replay key presses
    print("2️⃣ Replaying key presses...")
    navigator = SlideNavigator(deck, PrintingAudioCue(), alarm_asset=Config.ALARM_ASSET)
    router = InputRouter(navigator)

    for key in ["q", "a", "a", "q", "a", "1", "q", "\x7f", "9", "q", "q", "q"]:
        event = router.handle_key(key)
        view = navigator.current_view()
        action = event.interaction_type.value if event else "ignored"
        print(f"   {format_key(key):>8} -> {action:<8} {view.kind.value:<8} {view.text or view.image or ''}")
        for label, text in view.options:
            print(f"{'':>30}{label}: {text}")

    print("\n🎉 Example workflow complete!")
    print("\nNext steps:")
    print("1. Put your own questions in data/slides.json")
    print("2. Add sounds and images to data/assets/")
    print("3. Run the presenter: python -m quizdeck")


if __name__ == "__main__":
    main()
