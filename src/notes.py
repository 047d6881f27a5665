### this module contains the value types that chords are built out of:
### Naturals are the seven letter names C to B.
### Notes are spelled notes, a Natural with an accidental, such as Eb or D##.
### Pitches are abstract pitch classes in no particular octave, such as the pitch C#/Db.
### Octaves number the octaves of scientific pitch notation, where C4 is middle C.
### MidiNotes are specific notes like the keys of a piano, such as C4 (MIDI note 60).

from .intervals import Interval
from .parsing import fl, sh
from . import parsing, _settings

import numpy as np


class Natural:
    """one of the seven natural (white-key) note letters"""
    def __init__(self, letter):
        if isinstance(letter, Natural):
            letter = letter.letter
        if not parsing.is_natural_note_name(letter):
            raise ValueError(f'Not a natural note letter: {letter!r}')
        self.letter = letter
        self.position = parsing.natural_positions[letter]

    def __eq__(self, other):
        if isinstance(other, Natural):
            return self.letter == other.letter
        return NotImplemented

    def __hash__(self):
        return hash(f'Natural:{self.letter}')

    def __str__(self):
        return self.letter

    def __repr__(self):
        return f'Natural({self.letter!r})'


class Note:
    """a spelled note: a natural letter plus an accidental offset between -2 and +2.
    two Notes with different spellings (e.g. D## and E) resolve to the same Pitch."""
    def __init__(self, natural, offset=0):
        self.natural = Natural(natural)
        if offset not in parsing.offset_accidentals:
            raise ValueError(f'Accidental offset must be between -2 and 2, but got: {offset}')
        self.offset = offset

    @classmethod
    def from_name(cls, name):
        """parse a spelled note name like 'C', 'Eb' or 'F##'"""
        if not parsing.is_valid_note_name(name):
            raise ValueError(f'Not a valid note name: {name!r}')
        return cls(name[0], parsing.accidental_value(name[1:]))

    # named constructors:
    @classmethod
    def natural(cls, natural):
        return cls(natural, 0)
    @classmethod
    def flat(cls, natural):
        return cls(natural, -1)
    @classmethod
    def double_flat(cls, natural):
        return cls(natural, -2)
    @classmethod
    def sharp(cls, natural):
        return cls(natural, 1)
    @classmethod
    def double_sharp(cls, natural):
        return cls(natural, 2)

    @property
    def pitch(self):
        """the pitch class this spelling resolves to, which remembers whether it was spelled with flats"""
        prefer_sharps = None if self.offset == 0 else (self.offset > 0)
        return Pitch((self.natural.position + self.offset) % 12, prefer_sharps=prefer_sharps)

    @property
    def name(self):
        return f'{self.natural}{parsing.preferred_accidentals[self.offset]}'

    def __eq__(self, other):
        """Notes are equal if they share the same spelling"""
        if isinstance(other, Note):
            return (self.natural, self.offset) == (other.natural, other.offset)
        return NotImplemented

    def __hash__(self):
        return hash((self.natural, self.offset))

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'Note({self.name!r})'


class Pitch:
    """a pitch class defined in the abstract, i.e. not associated with any octave,
    such as C or D#. held as a position from 0 (C) to 11 (B)."""
    def __init__(self, position, prefer_sharps=None):
        """'position' is the semitone offset above C, between 0 and 11 (inclusive),
        or a note name string like 'Eb' that is parsed into one.

        'prefer_sharps':
            if True, this pitch will be displayed with sharps where applicable.
            if False, will be displayed with flats where applicable.
            if None (default), falls back on the global default in _settings"""
        if isinstance(position, Pitch):
            # accept re-casting:
            if prefer_sharps is None:
                prefer_sharps = position.prefer_sharps
            position = position.position
        elif isinstance(position, str):
            return_pitch = Note.from_name(position).pitch
            if prefer_sharps is None:
                prefer_sharps = return_pitch.prefer_sharps
            position = return_pitch.position
        elif isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f'Pitch must be initialised with an int position or a note name, but got: {type(position)}')

        if not (0 <= position < 12):
            raise ValueError(f'Pitch position must be between 0 and 11, but got: {position}')
        self.position = position
        self.prefer_sharps = prefer_sharps

    @property
    def name(self):
        prefer_sharps = _settings.DEFAULT_SHARPS if self.prefer_sharps is None else self.prefer_sharps
        return preferred_name(self.position, prefer_sharps=prefer_sharps)

    @property
    def is_natural(self):
        return self.position in parsing.position_naturals

    def __add__(self, other):
        """returns the Pitch that is some number of semitones higher, wrapping around the octave"""
        if isinstance(other, (int, Interval)) and not isinstance(other, bool):
            return Pitch((self.position + int(other)) % 12, prefer_sharps=self.prefer_sharps)
        raise TypeError(f'Only Intervals/integers can be added to a Pitch, not: {type(other)}')

    def __sub__(self, other):
        """if 'other' is another Pitch, return the ascending interval from other up to self.
        if 'other' is an integer or Interval, returns the Pitch that many semitones lower."""
        if isinstance(other, Pitch):
            return Interval.from_cache((self.position - other.position) % 12)
        elif isinstance(other, (int, Interval)) and not isinstance(other, bool):
            return Pitch((self.position - int(other)) % 12, prefer_sharps=self.prefer_sharps)
        raise TypeError(f'Only Pitches, Intervals or integers can be subtracted from a Pitch, not: {type(other)}')

    def __eq__(self, other):
        """Pitches are equal if they share a position, regardless of spelling"""
        if isinstance(other, Pitch):
            return self.position == other.position
        return NotImplemented

    def __hash__(self):
        return hash(f'Pitch:{self.position}')

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'Pitch({self.name!r})'


class Octave:
    """an octave number in scientific pitch notation, where C4 is middle C
    and the lowest MIDI note (0) is C-1"""
    def __init__(self, number):
        if isinstance(number, Octave):
            number = number.number
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f'Octave must be initialised with an int, but got: {type(number)}')
        self.number = number

    def __int__(self):
        return self.number

    def __index__(self):
        return self.number

    def __eq__(self, other):
        if isinstance(other, Octave):
            return self.number == other.number
        elif isinstance(other, int):
            return self.number == other
        return NotImplemented

    def __hash__(self):
        return hash(f'Octave:{self.number}')

    def __str__(self):
        return str(self.number)

    def __repr__(self):
        return f'Octave({self.number})'


#### notes at specific pitches
class MidiNote:
    """a note at a specific pitch, identified by its MIDI note number,
    where C4 (middle C) is 60 and A4 is 69.

    equality, ordering and hashing are by note number alone;
    the optional sharp/flat preference only affects how the note is named."""

    def __init__(self, pitch, octave=None, prefer_sharps=None):
        """initialises a MidiNote object from one of the following:
            1. a Pitch (or pitch class int / note name) and an Octave (or int), like MidiNote(Pitch.C, Octave.FOUR)
            2. a single MIDI note number, like MidiNote(60)
            3. another MidiNote, which is re-cast"""
        self.value, self.prefer_sharps = self._parse_input(pitch, octave, prefer_sharps)
        low, high = _settings.MIDI_RANGE
        if not (low <= self.value <= high):
            raise ValueError(f'MIDI note number must be between {low} and {high}, but got: {self.value}')

    @staticmethod
    def _parse_input(pitch, octave, prefer_sharps):
        if isinstance(pitch, MidiNote):
            assert octave is None, f'MidiNote re-cast from another MidiNote does not accept an octave arg'
            return pitch.value, (pitch.prefer_sharps if prefer_sharps is None else prefer_sharps)
        if octave is None:
            # init by MIDI note number:
            if isinstance(pitch, bool) or not isinstance(pitch, int):
                raise TypeError(f'MidiNote needs an octave unless it is initialised by note number, but got: {pitch!r}')
            return pitch, prefer_sharps
        pitch = Pitch(pitch)
        if prefer_sharps is None:
            prefer_sharps = pitch.prefer_sharps
        value = (int(Octave(octave)) + 1) * 12 + pitch.position
        return value, prefer_sharps

    @classmethod
    def from_byte(cls, value, prefer_sharps=None):
        """init by MIDI note number"""
        return cls(value, prefer_sharps=prefer_sharps)

    @classmethod
    def from_name(cls, name):
        """init by note name with octave, like 'C4' or 'Eb3' or 'G#-1'"""
        note_name, octave = parsing.parse_octavenote_name(name)
        return cls(Note.from_name(note_name).pitch, octave)

    @property
    def pitch(self):
        return Pitch(self.value % 12, prefer_sharps=self.prefer_sharps)

    @property
    def octave(self):
        return Octave((self.value // 12) - 1)

    @property
    def name(self):
        return f'{self.pitch.name}{self.octave}'

    @property
    def frequency(self):
        """equal-tempered frequency in Hz, relative to the reference pitch of A4"""
        return float(_settings.A4_PITCH * 2 ** ((self.value - 69) / 12))

    #### operators & magic methods:
    def __add__(self, interval):
        """returns a new MidiNote that is shifted up by some number of semitones."""
        if isinstance(interval, (int, Interval)) and not isinstance(interval, bool):
            return MidiNote(self.value + int(interval), prefer_sharps=self.prefer_sharps)
        raise TypeError(f'Only Intervals/integers can be added to a MidiNote, not: {type(interval)}')

    def __sub__(self, other):
        """if 'other' is an integer or Interval, returns a new MidiNote that is shifted down by that many semitones.
        if 'other' is another MidiNote, return the (non-negative) interval from other up to this note."""
        if isinstance(other, MidiNote):
            if other.value > self.value:
                raise ValueError(f'{other.name} is above {self.name}, so the distance between them is not a valid (non-negative) Interval')
            return Interval.from_cache(self.value - other.value)
        elif isinstance(other, (int, Interval)) and not isinstance(other, bool):
            return MidiNote(self.value - int(other), prefer_sharps=self.prefer_sharps)
        raise TypeError(f'Only MidiNotes, Intervals or integers can be subtracted from a MidiNote, not: {type(other)}')

    def abs_diff(self, other):
        """the unsigned distance between this note and another, in either direction"""
        if not isinstance(other, MidiNote):
            raise TypeError(f'abs_diff is only defined between MidiNotes, not: {type(other)}')
        return Interval.from_cache(abs(self.value - other.value))

    def __eq__(self, other):
        if isinstance(other, MidiNote):
            return self.value == other.value
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, MidiNote):
            return self.value < other.value
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, MidiNote):
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, MidiNote):
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, MidiNote):
            return self.value >= other.value
        return NotImplemented

    def __hash__(self):
        return hash(f'MidiNote:{self.value}')

    def __int__(self):
        return self.value

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'MidiNote({self.name})'


# get note name string from position in octave:
def preferred_name(pos, prefer_sharps=_settings.DEFAULT_SHARPS):
    """Gets the note name for a specific position according to preferred sharp/flat notation,
    or just the natural note name if a white note"""
    # if we've accidentally been given an Interval object for position, we quietly parse it:
    if isinstance(pos, Interval):
        pos = pos.value
    return parsing.preferred_note_names[sh if prefer_sharps else fl][pos]

def frequencies(midi_notes):
    """equal-tempered frequencies (in Hz) of an iterable of MidiNotes (or MIDI note numbers),
    returned as a numpy array"""
    values = np.asarray([int(n) for n in midi_notes], dtype=float)
    return _settings.A4_PITCH * 2.0 ** ((values - 69.0) / 12.0)


# named pitch classes:
for _pos, _name in enumerate(parsing.preferred_note_names[sh]):
    setattr(Pitch, _name.replace(sh, '_SHARP'), Pitch(_pos, prefer_sharps=True))
for _pos, _name in enumerate(parsing.preferred_note_names[fl]):
    if _pos not in parsing.position_naturals:
        setattr(Pitch, _name.replace(fl, '_FLAT'), Pitch(_pos, prefer_sharps=False))

# named octaves:
_octave_names = ['NEG_ONE', 'ZERO', 'ONE', 'TWO', 'THREE', 'FOUR', 'FIVE', 'SIX', 'SEVEN', 'EIGHT', 'NINE']
for _number, _name in enumerate(_octave_names, start=-1):
    setattr(Octave, _name, Octave(_number))

