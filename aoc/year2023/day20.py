"""Day 20: Pulse Propagation."""

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from aoc.core.errors import InvalidInputError

BROADCASTER = "broadcaster"
BUTTON = "button"


@dataclass
class Module:
    kind: str  # "%", "&" or "" for the broadcaster and untyped outputs
    outputs: List[str]
    on: bool = False
    memory: Dict[str, bool] = field(default_factory=dict)

    def receive(self, source: str, high: bool):
        """The pulse this module sends on, or None if it stays quiet."""
        if self.kind == "%":
            if high:
                return None
            self.on = not self.on
            return self.on
        if self.kind == "&":
            self.memory[source] = high
            return not all(self.memory.values())
        return high


def parse(text: str) -> Dict[str, Module]:
    modules: Dict[str, Module] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        name, sep, outputs = line.partition(" -> ")
        if not sep:
            raise InvalidInputError(f"Bad module configuration: {line!r}")
        kind = name[0] if name[0] in "%&" else ""
        name = name[len(kind) :].strip()
        if not kind and name != BROADCASTER:
            raise InvalidInputError(f"Unknown module type: {line!r}")
        modules[name] = Module(kind, [o.strip() for o in outputs.split(",")])
    if BROADCASTER not in modules:
        raise InvalidInputError("No broadcaster module")
    for name, module in list(modules.items()):
        for output in module.outputs:
            target = modules.setdefault(output, Module("", []))
            target.memory[name] = False
    return modules


def press(modules: Dict[str, Module]) -> List[Tuple[str, str, bool]]:
    """Pushes the button once and returns every pulse sent, in order."""
    sent = [(BUTTON, BROADCASTER, False)]
    queue = deque(sent)
    while queue:
        source, destination, high = queue.popleft()
        module = modules[destination]
        if not module.outputs:
            continue
        pulse = module.receive(source, high)
        if pulse is None:
            continue
        for output in module.outputs:
            queue.append((destination, output, pulse))
            sent.append((destination, output, pulse))
    return sent


def part1(text: str) -> int:
    modules = parse(text)
    low = high = 0
    for _ in range(1000):
        for _, _, pulse in press(modules):
            if pulse:
                high += 1
            else:
                low += 1
    return low * high


def part2(text: str, target: str = "rx") -> int:
    """
    Button presses before `target` first gets a low pulse.

    The target is fed by a single conjunction whose inputs each send a high
    pulse on their own fixed cycle, so the answer is the LCM of those cycles.
    """
    modules = parse(text)
    feeders = [name for name, module in modules.items() if target in module.outputs]
    if len(feeders) != 1 or modules[feeders[0]].kind != "&":
        raise InvalidInputError(f"{target} must be fed by exactly one conjunction")
    hub = feeders[0]
    cycles: Dict[str, int] = {}
    presses = 0
    while len(cycles) < len(modules[hub].memory):
        presses += 1
        if presses > 1_000_000:
            raise InvalidInputError(f"No cycle found for the inputs of {hub}")
        for source, destination, pulse in press(modules):
            if destination == hub and pulse:
                cycles.setdefault(source, presses)
    return math.lcm(*cycles.values())
