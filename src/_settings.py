############# preference settings:

### DEFAULT_SHARPS controls whether accidental ('black') notes are spelled
### with sharps or flats by default in the absence of other information.
### a parsed chord symbol like 'Bbm7' carries its own preference (flats),
### but a pitch built from a bare MIDI number, such as MidiNote.from_byte(61),
### falls back on this setting to decide between C# and Db.
DEFAULT_SHARPS = True

### DEFAULT_OCTAVE is the octave given to chords that are parsed from
### chord symbols, since a bare symbol like 'Cm7' says nothing about register.
### 4 places the root in the octave of middle C (C4 = MIDI note 60).
DEFAULT_OCTAVE = 4


############# pitch settings:

### A4_PITCH is the reference frequency (in Hz) that all other
### equal-tempered frequencies are computed from:
A4_PITCH = 440.0

### MIDI_RANGE is the inclusive range of note numbers that a MidiNote may take:
MIDI_RANGE = (0, 127)


############# diagnostic settings:

### VERBOSE is the initial state of the util.log diagnostic logger.
### diagnostics are printed only when this (or log.verbose) is True,
### and never change the value of anything that gets returned.
VERBOSE = False
