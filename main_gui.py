from word2ipa.main_gui import main
import os
import sys

if __name__ == "__main__":
    # Optional YAML config as the only argument
    main(sys.argv[1] if len(sys.argv) > 1 and os.path.isfile(sys.argv[1]) else None)
