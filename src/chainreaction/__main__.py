from __future__ import annotations

from chainreaction.main import main

if __name__ == "__main__":
    main()
