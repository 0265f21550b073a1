"""Parse a player's affiliation ('Columbus, OH', 'Scioto Country Club')."""

from dataclasses import dataclass

from .us_states import find_state


@dataclass(frozen=True)
class Affiliation:
    """A city/club with an optional state.

    state_code holds the raw text after the comma when it is not a
    recognized state ('Toronto, ON' -> state_code 'ON', state_name None).
    """
    raw: str
    city: str
    state_code: str | None = None
    state_name: str | None = None

    @property
    def state(self) -> str | None:
        return self.state_code

    @property
    def full(self) -> str:
        return self.raw

    @property
    def has_state(self) -> bool:
        return self.state_code is not None


def parse_affiliation(affiliation) -> Affiliation | None:
    """Parse an affiliation string. Blank input returns None.

    'Columbus, OH'        -> city 'Columbus', state 'OH', state_name 'Ohio'
    'Columbus, Ohio'      -> city 'Columbus', state 'OH', state_name 'Ohio'
    'Scioto Country Club' -> city 'Scioto Country Club', no state
    """
    if affiliation is None or not str(affiliation).strip():
        return None

    affiliation = str(affiliation).strip()
    if ',' not in affiliation:
        return Affiliation(raw=affiliation, city=affiliation)

    parts = [p.strip() for p in affiliation.split(',')]
    city, state_input = parts[0], parts[1]

    state = find_state(state_input)
    if state is None:
        return Affiliation(raw=affiliation, city=city, state_code=state_input)

    return Affiliation(raw=affiliation, city=city,
                       state_code=state.code, state_name=state.name)
