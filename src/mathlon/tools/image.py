from pathlib import Path
import logging as lg
import struct
import tomllib

from mathlon.common.hwconf import WORD_SIZE
from mathlon.codec.word import is_int


class ImageError(Exception):
    pass


class Image:
    words: list[int]
    instructions: int | None

    def __init__(self, words: list[int], instructions: int | None = None):
        self.words = words
        self.instructions = instructions

    def num_instrs(self) -> int:
        if self.instructions is None:
            return len(self.words)

        return self.instructions


def unpack_words(data: bytes) -> list[int]:
    if len(data) % WORD_SIZE != 0:
        raise ImageError(f'Image size {len(data)} is not a multiple of {WORD_SIZE}')

    return [word for (word,) in struct.iter_unpack('>I', data)]


def pack_words(words: list[int]) -> bytes:
    return b''.join(struct.pack('>I', word) for word in words)


def load_binary(filepath: Path) -> Image:
    lg.debug(f'Loading binary {filepath}')

    try:
        data = filepath.read_bytes()
    except OSError as e:
        raise ImageError(f'Cannot read {filepath}: {e}') from e

    return Image(unpack_words(data))


def load_manifest(filepath: Path) -> Image:
    lg.debug(f'Loading manifest {filepath}')

    try:
        config = tomllib.loads(filepath.read_text())
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ImageError(f'Cannot read manifest {filepath}: {e}') from e

    section = config.get('image')

    if not isinstance(section, dict) or 'binary' not in section:
        raise ImageError(f'Manifest {filepath} has no [image] binary')

    image = load_binary(filepath.parent / Path(section['binary']))
    instructions = section.get('instructions')

    if instructions is not None and not is_int(instructions):
        raise ImageError(f'Instruction count {instructions!r} is not an integer')

    image.instructions = instructions
    return image


def load_image(filepath: Path) -> Image:
    if filepath.suffix == '.toml':
        return load_manifest(filepath)

    return load_binary(filepath)
