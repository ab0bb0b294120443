import os

from pharmacy_admin import create_app
from pharmacy_admin.config import DevConfig, ProdConfig

debug = os.getenv("DEBUG", "false").strip().lower() in {"1", "true", "yes", "on"}
app = create_app(DevConfig if debug else ProdConfig)

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    app.logger.info("Pharmacy Admin API listening on port %s", port)
    app.run(host=host, port=port, debug=debug)
