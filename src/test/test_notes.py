from ..notes import *
from ..intervals import P1, M3, P4, P5, M9
from .testing_tools import compare

import numpy as np
import pytest

C4 = MidiNote(Pitch.C, Octave.FOUR)
E4 = MidiNote(Pitch.E, Octave.FOUR)
G4 = MidiNote(Pitch.G, Octave.FOUR)
A4 = MidiNote(Pitch.A, Octave.FOUR)

def test_naturals_and_spelled_notes():
    compare(Natural('E').position, 4)
    with pytest.raises(ValueError):
        Natural('H')

    compare(Note.natural('E').pitch, Pitch.E)
    compare(Note.sharp('C').pitch, Pitch.C_SHARP)
    compare(Note.double_sharp('D').pitch, Pitch.E)
    compare(Note.double_flat('D').pitch, Pitch.C)
    # accidentals wrap around the octave:
    compare(Note.flat('C').pitch, Pitch.B)
    compare(Note.sharp('B').pitch, Pitch.C)

    compare(Note.from_name('Eb').name, 'Eb')
    compare(Note.from_name('E♭'), Note.flat('E'))
    compare(Note.from_name('C𝄪').pitch, Pitch.D)
    with pytest.raises(ValueError):
        Note('C', 3)

def test_pitches():
    compare(str(Pitch(1)), 'C#')
    compare(str(Pitch(1, prefer_sharps=False)), 'Db')
    compare(str(Pitch('Bb')), 'Bb')
    # spelling never affects equality:
    compare(Pitch.C_SHARP, Pitch.D_FLAT)
    compare(len({Pitch('A#'), Pitch('Bb')}), 1)
    compare(Pitch.E.is_natural, True)
    compare(Pitch.E_FLAT.is_natural, False)

    compare(Pitch.C + 14, Pitch.D)
    compare(Pitch.A + M3, Pitch.C_SHARP)
    compare(Pitch.G - Pitch.C, P5)
    compare(Pitch.C - Pitch.G, P4)
    compare(Pitch.C - Pitch.C, P1)

    with pytest.raises(ValueError):
        Pitch(12)
    with pytest.raises(TypeError):
        Pitch.C + 'E'

def test_octaves():
    compare(Octave.FOUR, 4)
    compare(Octave.NEG_ONE.number, -1)
    compare(Octave.NINE, Octave(9))

def test_midinote_init():
    compare(C4.value, 60)
    compare(A4.value, 69)
    compare(MidiNote.from_byte(60), C4)
    compare(MidiNote.from_name('Eb3').value, 51)
    compare(MidiNote.from_name('C-1').value, 0)
    compare(MidiNote.from_name('G9').value, 127)
    compare(MidiNote('Eb', 3).name, 'Eb3')

    compare(C4.pitch, Pitch.C)
    compare(C4.octave, Octave.FOUR)
    compare(str(C4), 'C4')
    compare(repr(C4), 'MidiNote(C4)')

    with pytest.raises(ValueError):
        MidiNote(128)
    with pytest.raises(ValueError):
        MidiNote.from_name('C')
    with pytest.raises(ValueError):
        MidiNote.from_name('H4')

def test_midinote_spelling():
    compare(MidiNote.from_byte(61).name, 'C#4')
    compare(MidiNote.from_byte(61, prefer_sharps=False).name, 'Db4')
    # spelling preference survives transposition, but never affects equality:
    compare((MidiNote.from_name('Db4') + 2).name, 'Eb4')
    compare(MidiNote.from_name('Db4'), MidiNote.from_name('C#4'))

def test_midinote_arithmetic():
    compare(C4 + M3, E4)
    compare(E4 - M3, C4)
    compare(C4 + M9, MidiNote.from_name('D5'))
    compare(E4 - C4, M3)
    compare(C4.abs_diff(E4), M3)
    compare(E4.abs_diff(C4), M3)
    with pytest.raises(ValueError):
        C4 - E4

    compare(sorted([G4, C4, E4]), [C4, E4, G4])
    compare(len({C4, MidiNote.from_byte(60)}), 1)

def test_frequencies():
    compare(A4.frequency, 440.0)
    assert C4.frequency == pytest.approx(261.6256, abs=1e-4)

    freqs = frequencies([A4, A4 + 12, 57])
    compare(isinstance(freqs, np.ndarray), True)
    compare(freqs, np.array([440., 880., 220.]))
