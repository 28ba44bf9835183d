"""
Mediasort - Download folder sorter for a media library.

Periodically scans completed downloads and:
- Classifies release folders as TV episodes or movies
- Renames the main video file to a standardized format
- Moves it into the TV or movie library
- Deletes sidecar files and emptied release folders
"""

__version__ = "0.1.0"
