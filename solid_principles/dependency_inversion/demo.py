from solid_principles.dependency_inversion import corrected, problematic


def run_problematic() -> None:
    print("Problematic Code with Direct Dependency:")

    # The switch is tightly coupled to a LightBulb
    light_switch = problematic.Switch()
    light_switch.operate()


def run_corrected() -> None:
    print()
    print("Corrected Code with Dependency Inversion:")

    light_bulb = corrected.LightBulb()
    switch_for_light = corrected.Switch(light_bulb)
    switch_for_light.operate()

    fan = corrected.Fan()
    switch_for_fan = corrected.Switch(fan)
    switch_for_fan.operate()


def run() -> None:
    """Print the problematic design's output, then the corrected one's."""
    run_problematic()
    run_corrected()
