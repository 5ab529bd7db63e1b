#!/usr/bin/env python3
"""
PropGallery - listing photo slideshows
Entry point for running from a source checkout.
"""

import sys
from pathlib import Path

src_path = Path(__file__).parent / 'src'
sys.path.insert(0, str(src_path))

if __name__ == "__main__":
    from propgallery.main import main
    main()
