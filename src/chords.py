from .notes import Note, MidiNote
from .intervals import IntervalSet
from .intervals import UNISON, MAJOR_SECOND, MINOR_THIRD, MAJOR_THIRD, PERFECT_FOURTH, TRITONE, PERFECT_FIFTH, MINOR_SEVENTH, MAJOR_SEVENTH, OCTAVE, MAJOR_NINTH
from .util import log
from . import parsing, _settings

import numpy as np

################################################################################


class Chord:
    """a chord built on a specific root note, which may be sounded over a different bass note.

    its principal members are:
        root: the MidiNote that names the chord
        bass: the lowest sounding MidiNote, if it differs from the root (otherwise None)
        is_inversion: True when the chord is sounded over a bass that is not its root
        intervals: an IntervalSet of the chord's notes, measured from its lowest note
                   (the bass if there is one, otherwise the root)

    the quality builders (Chord.major, Chord.minor, etc.) and chainable methods
    (chord.major_seventh(), chord.inverted_on(note), etc.) all return new Chord objects,
    so a chord is never altered by building another chord out of it."""
    def __init__(self, root, bass=None, is_inversion=False, intervals=None):
        self.root = MidiNote(root)
        self.bass = MidiNote(bass) if bass is not None else None
        self.is_inversion = is_inversion
        self.intervals = IntervalSet(intervals) if intervals is not None else IntervalSet()

    @classmethod
    def new(cls, root):
        """an empty chord on this root, containing no intervals at all"""
        return cls(root)

    #### quality builders, each anchored at the unison:
    @classmethod
    def major(cls, root):
        return cls.new(root).with_root().interval(MAJOR_THIRD).interval(PERFECT_FIFTH)

    @classmethod
    def minor(cls, root):
        return cls.new(root).with_root().interval(MINOR_THIRD).interval(PERFECT_FIFTH)

    @classmethod
    def diminished(cls, root):
        return cls.new(root).with_root().interval(MINOR_THIRD).interval(TRITONE)

    @classmethod
    def sus2(cls, root):
        return cls.new(root).with_root().interval(MAJOR_SECOND).interval(PERFECT_FIFTH)

    @classmethod
    def sus4(cls, root):
        return cls.new(root).with_root().interval(PERFECT_FOURTH).interval(PERFECT_FIFTH)

    @classmethod
    def seventh(cls, root):
        """the dominant seventh: a major triad with a minor seventh"""
        return cls.major(root).interval(MINOR_SEVENTH)

    @classmethod
    def minor_seventh(cls, root):
        return cls.minor(root).interval(MINOR_SEVENTH)

    @classmethod
    def major_seventh_chord(cls, root):
        return cls.major(root).major_seventh()

    @classmethod
    def half_diminished(cls, root):
        return cls.diminished(root).interval(MINOR_SEVENTH)

    #### chainable methods:
    def interval(self, interval):
        """returns a new Chord with this interval (measured from the lowest note) added"""
        new_chord = self.copy()
        new_chord.intervals.push(interval)
        return new_chord

    def with_root(self):
        """adds the unison, so that the lowest note of the chord sounds"""
        return self.interval(UNISON)

    def major_seventh(self):
        return self.interval(MAJOR_SEVENTH)

    def major_ninth(self):
        return self.interval(MAJOR_NINTH)

    def on_bass(self, bass_note):
        """returns a new Chord with this bass note set, leaving the inversion flag alone"""
        new_chord = self.copy()
        new_chord.bass = MidiNote(bass_note)
        return new_chord

    def inverted_on(self, bass_note):
        """returns a new Chord sounded over this bass note, marked as an inversion"""
        new_chord = self.on_bass(bass_note)
        new_chord.is_inversion = True
        return new_chord

    def copy(self):
        return Chord(self.root, self.bass, self.is_inversion, self.intervals.copy())

    #### inference from sounding notes:
    @classmethod
    def from_midi(cls, root, midi_notes):
        """infers a chord on the given root from a sequence of MidiNotes,
        the first of which is taken to be the bass (i.e. lowest sounding) note.
        the notes are read in the order given, and are not sorted.

        returns None if midi_notes is empty, and raises ValueError if any note
        lies below the first one."""
        root = MidiNote(root)
        notes_iter = iter(midi_notes)
        bass_note = next(notes_iter, None)
        if bass_note is None:
            log(f'No notes given to infer a chord on {root} from')
            return None
        bass_note = MidiNote(bass_note)

        if bass_note != root:
            bass, is_inversion = bass_note, True
        else:
            bass, is_inversion = None, False

        # the unison is always counted, whether or not the root itself is among the notes:
        intervals = IntervalSet(UNISON)
        lowest_note = bass if bass is not None else root
        for note in notes_iter:
            note = MidiNote(note)
            if note < lowest_note:
                raise ValueError(f'Notes must be given bass-first, but {note} is lower than the bass note {lowest_note}')
            intervals.push(note - lowest_note)
        log(f'Inferred chord on root {root} (bass={bass}) with intervals: {intervals}')
        return cls(root, bass, is_inversion, intervals)

    @classmethod
    def from_notes(cls, midi_notes):
        """infers a root-position chord from a sequence of MidiNotes,
        taking the first of them as both root and bass"""
        midi_notes = [MidiNote(n) for n in midi_notes]
        if len(midi_notes) == 0:
            root = MidiNote.from_byte(0)
            return cls.from_midi(root, [root])
        return cls.from_midi(midi_notes[0], midi_notes)

    #### derived properties:
    @property
    def lowest_note(self):
        return self.bass if self.bass is not None else self.root

    def root_intervals(self):
        """the intervals of this chord re-measured from its root instead of its lowest note,
        each as the unsigned distance from the root to that note.
        computed on note numbers, so chord tones above the MIDI range are still measured"""
        lowest_note = self.lowest_note
        root_intervals = self.intervals.map(lambda iv: abs(lowest_note.value + iv.value - self.root.value))
        log(f'Re-anchored {self.intervals} from {lowest_note} to root {self.root}: {root_intervals}')
        return root_intervals

    def midi_notes(self):
        """the notes of this chord, ascending from its lowest note"""
        return MidiNotes(self.lowest_note, self.intervals)

    def __iter__(self):
        return iter(self.midi_notes())

    def __len__(self):
        return len(self.intervals)

    def chroma(self):
        """12-element pitch class vector of this chord, with a 1
        at the position (from C=0) of every pitch class that sounds"""
        chroma = np.zeros(12, dtype=np.int32)
        for iv in self.intervals:
            chroma[(self.lowest_note.value + iv.value) % 12] = 1
        return chroma

    #### display:
    def symbol(self):
        """this chord's symbol, like 'Cm7' or 'Gm/C' or 'Em/C(no5)'"""
        root_intervals = self.root_intervals()
        return ''.join([rule(self, root_intervals) for rule in symbol_rules])

    def __str__(self):
        return self.symbol()

    def __repr__(self):
        bass_str = f' bass={self.bass.name}' if self.bass is not None else ''
        inv_str = ' inverted' if self.is_inversion else ''
        return f'<Chord {self.symbol()} (root={self.root.name}{bass_str}{inv_str} intervals={self.intervals})>'

    #### parsing:
    @classmethod
    def parse(cls, symbol):
        """reads a chord symbol like 'Cm7', 'Bbmaj7', 'Gm/C' or 'C/E(no root)' into a Chord.
        see parse_chord_symbol for the accepted grammar"""
        return parse_chord_symbol(symbol)

    @classmethod
    def from_string(cls, symbol):
        return parse_chord_symbol(symbol)

    #### magic methods:
    def __eq__(self, other):
        """chords are equal if they share root, bass, inversion flag and intervals"""
        if isinstance(other, Chord):
            return (self.root == other.root
                    and self.bass == other.bass
                    and self.is_inversion == other.is_inversion
                    and self.intervals == other.intervals)
        return NotImplemented

    def __hash__(self):
        return hash((self.root, self.bass, self.is_inversion, tuple(self.intervals.values())))


class MidiNotes:
    """the notes of a chord, computed lazily from a base note and a snapshot
    of an IntervalSet. every new iteration starts again from the lowest note."""
    def __init__(self, base, intervals):
        self.base = MidiNote(base)
        self.intervals = intervals.copy()

    def __iter__(self):
        for interval in self.intervals:
            yield self.base + interval

    def __len__(self):
        return len(self.intervals)

    def __repr__(self):
        return f'MidiNotes({", ".join([n.name for n in self])})'


def chords(midi_notes):
    """yields the chord inferred from these notes with each one of them taken as root in turn.
    e.g. C4, E4, G4 gives C, then Em/C(no5), then Gm/C"""
    midi_notes = [MidiNote(n) for n in midi_notes]
    for root in midi_notes:
        yield Chord.from_midi(root, midi_notes)


#### chord symbol formatting rules.
### each rule reads a chord and its (precomputed) root-relative intervals
### and returns the token it contributes to the chord symbol, possibly empty.
### the symbol is the concatenation of these tokens, in this order.

def _root_token(chord, root_intervals):
    return chord.root.pitch.name

def _quality_token(chord, root_intervals):
    if MINOR_THIRD in root_intervals:
        return 'm'
    elif MAJOR_SECOND in root_intervals:
        return 'sus2'
    elif PERFECT_FOURTH in root_intervals:
        return 'sus4'
    return ''

def _fifth_token(chord, root_intervals):
    return 'b5' if TRITONE in root_intervals else ''

def _seventh_token(chord, root_intervals):
    if MINOR_SEVENTH in root_intervals:
        return '7'
    elif MAJOR_SEVENTH in root_intervals:
        return 'maj7'
    return ''

def _bass_token(chord, root_intervals):
    return f'/{chord.bass.pitch.name}' if chord.bass is not None else ''

def _no_root_token(chord, root_intervals):
    return '(no root)' if UNISON not in root_intervals else ''

def _no_fifth_token(chord, root_intervals):
    # a flattened fifth still counts as a fifth:
    has_fifth = (TRITONE in root_intervals) or (PERFECT_FIFTH in root_intervals)
    return '(no5)' if not has_fifth else ''

symbol_rules = [_root_token, _quality_token, _fifth_token, _seventh_token,
                _bass_token, _no_root_token, _no_fifth_token]


#### chord symbol parsing:

# base triads selected by the quality token that follows the root:
quality_builders = {'m': Chord.minor, 'sus2': Chord.sus2, 'sus4': Chord.sus4, '': Chord.major}
# interval added by each modifier token:
modifier_intervals = {'7': MINOR_SEVENTH, 'maj7': MAJOR_SEVENTH}
modifier_intervals.update({token: TRITONE for token in parsing.flat_five_tokens})
# interval (measured from the root) removed by each trailing qualifier:
qualifier_removals = {'(no root)': UNISON, '(no5)': PERFECT_FIFTH}

def _match_token(string, tokens):
    """returns the longest of the given tokens that the string begins with, or None"""
    for token in sorted(tokens, key=len, reverse=True):
        if len(token) > 0 and string.startswith(token):
            return token
    return None

def _parse_pitch(string):
    """splits a spelled note from the front of a string, returning its Pitch and whatever follows"""
    natural, accidental, remainder = parsing.note_split(string)
    if accidental not in parsing.accidental_offsets:
        raise ValueError(f'Invalid accidental {accidental!r} in: {string!r}')
    return Note(natural, parsing.accidental_value(accidental)).pitch, remainder

def parse_chord_symbol(symbol):
    """parses a chord symbol according to the grammar:
        <letter>[accidental][quality]<modifier>*[/<letter>[accidental]]<qualifier>*
    where:
        accidental is one of: b, bb, #, ## (or their unicode equivalents)
        quality is one of: m, sus2, sus4 (or nothing, for a major triad)
        modifiers are any of: b5 (or ♭5), 7, maj7 (in any order)
        qualifiers are any of: (no root), (no5)
    a 'b5' directly after the letter is read as the flat five modifier,
        so 'Cb5' is C with a flat fifth, and 'Cbb5' is Cb with a flat fifth.
    the root is placed in the octave given by _settings.DEFAULT_OCTAVE,
        and a slash bass is placed in the octave below the nearest pitch below the root
        (see _place_bass).
    raises ValueError for anything outside this grammar."""
    if not isinstance(symbol, str):
        raise TypeError(f'Chord symbol must be a string, not: {type(symbol)}')
    if len(symbol) == 0:
        raise ValueError('Cannot parse a chord from an empty string')

    root_pitch, rest = _parse_pitch(symbol)
    root = MidiNote(root_pitch, _settings.DEFAULT_OCTAVE)

    # 'm' must not swallow the start of a 'maj7' modifier:
    quality = _match_token(rest, quality_builders)
    if quality is None or (quality == 'm' and rest.startswith('maj7')):
        quality = ''
    rest = rest[len(quality):]
    chord = quality_builders[quality](root)

    modifier = _match_token(rest, modifier_intervals)
    while modifier is not None:
        chord = chord.interval(modifier_intervals[modifier])
        rest = rest[len(modifier):]
        modifier = _match_token(rest, modifier_intervals)

    bass_pitch = None
    if rest.startswith('/'):
        bass_pitch, rest = _parse_pitch(rest[1:])

    qualifier = _match_token(rest, qualifier_removals)
    while qualifier is not None:
        chord.intervals.remove(qualifier_removals[qualifier])
        rest = rest[len(qualifier):]
        qualifier = _match_token(rest, qualifier_removals)

    if len(rest) > 0:
        raise ValueError(f'Unrecognised token {rest!r} in chord symbol: {symbol!r}')

    if bass_pitch is not None and bass_pitch != root_pitch:
        chord = _place_bass(chord, bass_pitch)
    log(f'Parsed {symbol!r} as: {chord!r}')
    return chord

def _place_bass(chord, bass_pitch):
    """sounds a root-position chord over bass_pitch, re-measuring its intervals
    from that bass note, which itself sounds.
    the bass goes an octave below the nearest bass_pitch under the root, so its distance
    from the root is between 13 and 23 semitones. the chord's symbol then reads exactly
    as it would without the bass, since no symbol token looks past the octave."""
    offset = (chord.root.pitch - bass_pitch) + OCTAVE
    bass = MidiNote(chord.root - offset, prefer_sharps=bass_pitch.prefer_sharps)
    intervals = (chord.intervals + offset)
    intervals.push(UNISON)
    return Chord(chord.root, bass, True, intervals)
