"""
GRP archive summaries.

Categorizes archive entries by file type and guesses which BUILD engine
game an archive belongs to.
"""

from dataclasses import dataclass, field

from buildkit.grp import GrpArchive

SOUND_EXTENSIONS = {'VOC', 'WAV'}
MUSIC_EXTENSIONS = {'MID', 'MIDI', 'OGG'}

COMMON_FILES = [
    'PALETTE.DAT',
    'LOOKUP.DAT',
    'TILES000.ART',
    'TILES001.ART',
    'DEFS.CON',
    'GAME.CON',
    'USER.CON',
    'DUKE3D.DEF',
]

# (game, filename substrings, marker entries); first match wins
KNOWN_GAMES = [
    ('Duke Nukem 3D', ['duke3d'], ['DEFS.CON', 'GAME.CON']),
    ('Shadow Warrior', ['sw'], ['SW.DEF']),
    ('Blood', ['blood'], ['BLOOD.INI']),
    ('Redneck Rampage', ['redneck'], ['REDNECK.GRP']),
    ('NAM', ['nam'], ['NAM.GRP']),
]
GENERIC_GAME = 'BUILD Engine Game'


@dataclass
class GrpInfo:
    """Summary of a GRP archive's contents."""

    filename: str
    signature: str
    total_files: int
    total_size: int
    map_count: int = 0
    art_count: int = 0
    sound_count: int = 0
    music_count: int = 0
    other_count: int = 0
    known_game: str | None = None
    common_files: list[str] = field(default_factory=list)


def analyze_grp(archive: GrpArchive, filename: str) -> GrpInfo:
    """
    Summarize an archive.

    Args:
        archive: Parsed archive
        filename: Name the archive was loaded from, used for game detection

    Returns:
        GrpInfo with per-category counts and the detected game.
    """
    info = GrpInfo(
        filename=filename,
        signature=archive.signature,
        total_files=archive.count,
        total_size=sum(entry.size for entry in archive),
    )

    for entry in archive:
        ext = entry.extension
        if ext == 'MAP':
            info.map_count += 1
        elif ext == 'ART':
            info.art_count += 1
        elif ext in SOUND_EXTENSIONS:
            info.sound_count += 1
        elif ext in MUSIC_EXTENSIONS:
            info.music_count += 1
        else:
            info.other_count += 1

        if entry.name in COMMON_FILES:
            info.common_files.append(entry.name)

    info.known_game = identify_game(archive, filename)
    return info


def identify_game(archive: GrpArchive, filename: str) -> str | None:
    """Guess the game from the archive filename and marker entries."""
    names = {entry.name for entry in archive}
    lower_filename = filename.lower()

    for game, substrings, markers in KNOWN_GAMES:
        if any(s in lower_filename for s in substrings) or any(m in names for m in markers):
            return game

    extensions = {entry.extension for entry in archive}
    if 'MAP' in extensions and 'ART' in extensions:
        return GENERIC_GAME

    return None


def format_bytes(size: int) -> str:
    """Format a byte count as a short human-readable string (e.g. '1.5 KB')."""
    if size == 0:
        return '0 B'
    units = ['B', 'KB', 'MB', 'GB']
    value = float(size)
    i = 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    return f'{round(value, 1):g} {units[i]}'
