# =============================================================================
# core/circuits.py  —  Arduino Circuit Workspace Builder
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a free-text request ("blink an LED", "read a button") into the
#   props of the circuit workspace widget: a sketch, a bill of materials,
#   schematic notes, and the pre-highlighted code.
#
# WHY MOCK TEMPLATES?
#   The demo isn't a code generator.  A few hand-written sketches cover the
#   classic starter circuits; the prompt only picks between them.  Same
#   idea as the mock profile table: a clean interface with canned data
#   behind it.
#
# TEMPLATE SELECTION:
#   First template whose trigger words appear in the prompt wins
#   (case-insensitive).  Nothing matches → the blink sketch.
# =============================================================================

from dataclasses import dataclass, field

from core.highlight import highlight_code
from core.models import CircuitComponent, CircuitWorkspace

# The schematic preview only has room for this many parts.
DIAGRAM_SLOTS = 4


@dataclass(frozen=True)
class _Template:
    key: str
    triggers: tuple[str, ...]
    filename: str
    diagram_title: str
    code: str
    diagram_notes: tuple[str, ...] = ()
    components: tuple[tuple[str, int, str], ...] = field(default_factory=tuple)


_BLINK = _Template(
    key="blink",
    triggers=("blink", "led", "light"),
    filename="blink_led.ino",
    diagram_title="LED on D13",
    code="""\
// Blink an LED on pin 13 once per second
#define LED_PIN 13

void setup() {
  pinMode(LED_PIN, OUTPUT);
}

void loop() {
  digitalWrite(LED_PIN, HIGH);
  delay(1000);
  digitalWrite(LED_PIN, LOW);
  delay(1000);
}""",
    diagram_notes=(
        "D13 drives the LED anode through a 220 ohm resistor.",
        "LED cathode returns to GND.",
    ),
    components=(
        ("Arduino Uno R3", 1, "https://store.arduino.cc/products/arduino-uno-rev3"),
        ("5mm Red LED", 1, "https://www.adafruit.com/product/297"),
        ("220 ohm Resistor", 1, "https://www.adafruit.com/product/2780"),
        ("Half-size Breadboard", 1, "https://www.adafruit.com/product/64"),
    ),
)

_BUTTON = _Template(
    key="button",
    triggers=("button", "switch", "press"),
    filename="button_led.ino",
    diagram_title="Push button on D2",
    code="""\
// Light the LED while the button is held
#define BUTTON_PIN 2
#define LED_PIN 13

void setup() {
  pinMode(BUTTON_PIN, INPUT);
  pinMode(LED_PIN, OUTPUT);
}

void loop() {
  int state = digitalRead(BUTTON_PIN);
  if (state == HIGH) {
    digitalWrite(LED_PIN, HIGH);
  } else {
    digitalWrite(LED_PIN, LOW);
  }
}""",
    diagram_notes=(
        "Button bridges 5V to D2; a 10k pull-down holds D2 LOW when released.",
        "D13 drives the LED through a 220 ohm resistor.",
    ),
    components=(
        ("Arduino Uno R3", 1, "https://store.arduino.cc/products/arduino-uno-rev3"),
        ("Tactile Push Button", 1, "https://www.adafruit.com/product/367"),
        ("10k ohm Resistor", 1, "https://www.adafruit.com/product/2784"),
        ("5mm Red LED", 1, "https://www.adafruit.com/product/297"),
        ("220 ohm Resistor", 1, "https://www.adafruit.com/product/2780"),
    ),
)

_SERVO = _Template(
    key="servo",
    triggers=("servo", "potentiometer", "knob", "motor"),
    filename="knob_servo.ino",
    diagram_title="Potentiometer → servo",
    code="""\
// Sweep a servo to follow a potentiometer
#include <Servo.h>

const int POT_PIN = A0;
const int SERVO_PIN = 9;
Servo arm;

void setup() {
  arm.attach(SERVO_PIN);
}

void loop() {
  int raw = analogRead(POT_PIN);
  int angle = map(raw, 0, 1023, 0, 180);
  arm.write(angle);
  delay(15);
}""",
    diagram_notes=(
        "Potentiometer wiper feeds A0; outer legs go to 5V and GND.",
        "Servo signal on D9, powered from 5V.",
    ),
    components=(
        ("Arduino Uno R3", 1, "https://store.arduino.cc/products/arduino-uno-rev3"),
        ("10k Potentiometer", 1, "https://www.adafruit.com/product/562"),
        ("Micro Servo SG90", 1, "https://www.adafruit.com/product/169"),
        ("Jumper Wires", 10, "https://www.adafruit.com/product/758"),
    ),
)

_TEMPLATES = (_BUTTON, _SERVO, _BLINK)


def list_templates() -> list[str]:
    return [template.key for template in _TEMPLATES]


def _pick_template(prompt: str) -> _Template:
    lowered = prompt.lower()
    for template in _TEMPLATES:
        if any(word in lowered for word in template.triggers):
            return template
    return _BLINK


def build_workspace(prompt: str) -> CircuitWorkspace:
    """Build circuit workspace props for a request.

    Args:
        prompt: The user's description of the circuit they want.

    Returns:
        A CircuitWorkspace with the sketch already highlighted line by line.
    """
    template = _pick_template(prompt)
    return CircuitWorkspace(
        prompt=prompt,
        filename=template.filename,
        code=template.code,
        diagram_title=template.diagram_title,
        diagram_notes=list(template.diagram_notes),
        components=[
            CircuitComponent(name=name, qty=qty, purchase_url=url)
            for name, qty, url in template.components
        ],
        highlighted=highlight_code(template.code),
    )


def diagram_components(
    workspace: CircuitWorkspace, limit: int = DIAGRAM_SLOTS
) -> list[CircuitComponent]:
    """The parts drawn in the schematic preview (first few only)."""
    return workspace.components[:limit]
