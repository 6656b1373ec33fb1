from __future__ import annotations

import locale
import logging

from werkzeug.serving import make_server

from web import ConfigValidationError, create_app, load_config

logger = logging.getLogger("web")


def main() -> None:
    try:
        config = load_config()
    except ConfigValidationError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
    )

    # %c на странице должен следовать LANG/LC_TIME, а Python стартует в локали "C"
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning("LC_TIME locale not applied, using default: %s", e)

    app = create_app(config)

    # Werkzeug биндит сокет до входа в цикл обслуживания; ошибка bind (OSError) роняет процесс.
    server = make_server(config.host, config.port, app, threaded=True)
    logger.info("Server running on port %s - Version: %s", config.port, config.version)
    server.serve_forever()


if __name__ == "__main__":
    main()
