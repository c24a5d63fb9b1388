#!/usr/bin/env python3
"""
Filename utilities for generating output filenames.
"""

import os
import logging

logger = logging.getLogger(__name__)

# Input extensions stripped from the base name
KNOWN_INPUT_EXTENSIONS = (".csv", ".gpx", ".txt")


def generate_output_filename(
    input_filename: str, suffix: str = " map", extension: str = ".html"
) -> str:
    """
    Generates an output filename next to the input and reserves it by creating an empty file.

    Strategy:
    1. If input ends with a known location extension (case-insensitive), drop it
    2. Append suffix and extension, e.g. " map.html"
    3. If file exists, try " (1)", " (2)", etc. (by attempting to create exclusively)
    4. Stop at 180 attempts
    5. Use exclusive open (`open(path, 'x')`) to avoid race conditions and reserve the name.

    Args:
        input_filename: Path to the input location file ("-" for stdin)
        suffix: Text appended to the base name
        extension: Extension of the output file, including the dot

    Returns:
        Safe output filename that has been created as an empty file to reserve its name

    Raises:
        RuntimeError: If no available filename found after 180 attempts
        ValueError: If a filename cannot be created (e.g., due to permissions or an invalid name detected by the OS)
    """
    if input_filename == "-":
        input_filename = "stdin"

    input_dir = os.path.dirname(input_filename)
    input_base = os.path.basename(input_filename)

    base_name, input_extension = os.path.splitext(input_base)
    if input_extension.lower() not in KNOWN_INPUT_EXTENSIONS:
        base_name = input_base

    base_output = base_name + suffix

    candidates = [os.path.join(input_dir, base_output + extension)]
    candidates.extend(
        os.path.join(input_dir, f"{base_output} ({i}){extension}") for i in range(1, 181)
    )

    for candidate in candidates:
        try:
            with open(candidate, "x"):
                pass
            return candidate
        except FileExistsError:
            continue
        except OSError as e:
            logger.error(f"Cannot create file {candidate}: {e}")
            raise ValueError(f"Cannot create file: {e}")

    logger.error(
        f"Could not find an available filename after 180 attempts. "
        f"Please clean up your output directory or specify the output file explicitly."
    )
    raise RuntimeError("No available filename found after 180 attempts")
