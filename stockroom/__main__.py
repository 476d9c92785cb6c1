from stockroom.cli.app import main_menu
from stockroom.logging import configure_logging
from stockroom.scripts.seed import build_services, seed_demo_data
from stockroom.settings import settings


def main() -> None:
    configure_logging()
    if settings.seed_demo_data:
        seed_demo_data(*build_services())
    main_menu()


if __name__ == "__main__":
    main()
