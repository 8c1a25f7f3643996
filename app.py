"""Development server entry point: `python app.py`."""
from __future__ import annotations

from src.laundry_zone.laundry_zone.main import create_app, load_settings

app = create_app()


if __name__ == "__main__":
    settings = load_settings()
    app.run(host="0.0.0.0", port=int(settings.get("PORT") or 3001), debug=bool(settings.get("DEBUG")))
