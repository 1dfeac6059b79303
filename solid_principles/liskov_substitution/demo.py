import logging

from solid_principles.core.exceptions import UnsupportedOperationError
from solid_principles.domain.interfaces import BirdAbstract, IBird
from solid_principles.liskov_substitution import corrected, problematic

logger = logging.getLogger(__name__)


def _fly_and_report(bird: problematic.IBird) -> None:
    try:
        bird.fly()
    except UnsupportedOperationError as e:
        logger.info(
            "Substituted bird refused to fly",
            extra={"context": {"error": str(e)}},
        )
        print(e)


def run_abstract() -> None:
    print("Problematic Code with Abstract Classes:")

    bird: problematic.BirdAbstract = problematic.OstrichAbstract()
    _fly_and_report(bird)

    print()
    print("Corrected Code with Abstract Classes:")

    corrected_bird1: BirdAbstract = corrected.FlyingBirdAbstract()
    corrected_bird1.move()

    corrected_bird2: BirdAbstract = corrected.OstrichCorrectedAbstract()
    corrected_bird2.move()


def run_interface() -> None:
    print()
    print("Problematic Code with Interface:")

    bird: problematic.IBird = problematic.OstrichInterface()
    _fly_and_report(bird)

    print()
    print("Corrected Code with Interface:")

    corrected_bird1: IBird = corrected.FlyingBirdInterface()
    corrected_bird1.move()

    corrected_bird2: IBird = corrected.OstrichCorrectedInterface()
    corrected_bird2.move()


def run() -> None:
    """Print both flavours: abstract classes first, then interfaces."""
    run_abstract()
    run_interface()
