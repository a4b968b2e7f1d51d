"""Package entry point for ``python -m transcript_segmenter``.

WHY: Users run the segmenter as ``python -m transcript_segmenter notes.txt``
without installing the console script.

HOW: Delegates straight to the CLI's main() function.
"""

from transcript_segmenter.cli import main

if __name__ == "__main__":
    main()
