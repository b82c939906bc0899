import argparse
import logging
import sys
import subprocess
from importlib import resources

from .constants import DIAMOND_OPTIONS, DEFAULT_DIAMOND
from .logging_config import configure_logging
from .pricing import DiamondDescription, predict_price
from .settings import get_settings
from .utils import fmt_usd
from .validation import validate_diamond

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="diamond-estimator",
        description="Diamond price estimator: launch the Streamlit app or price a single stone."
    )
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Launch the Streamlit app (default)")
    serve.add_argument("--port", type=int, default=settings.port, help=f"Port to serve on (default: {settings.port})")
    serve.add_argument("--headless", action="store_true", help="Run in headless mode (no auto-browser)")
    serve.add_argument("--server-address", default=settings.server_address,
                       help=f"Bind address (default: {settings.server_address})")

    est = sub.add_parser("estimate", help="Print a price estimate for one diamond")
    est.add_argument("--carat", type=float, default=DEFAULT_DIAMOND["carat"])
    est.add_argument("--cut", choices=DIAMOND_OPTIONS["cut"], default=DEFAULT_DIAMOND["cut"])
    est.add_argument("--color", choices=DIAMOND_OPTIONS["color"], default=DEFAULT_DIAMOND["color"])
    est.add_argument("--clarity", choices=DIAMOND_OPTIONS["clarity"], default=DEFAULT_DIAMOND["clarity"])
    est.add_argument("--depth", type=float, default=DEFAULT_DIAMOND["depth"], help="Depth percentage")
    est.add_argument("--table", type=float, default=DEFAULT_DIAMOND["table"], help="Table percentage")
    return parser


def streamlit_command(port: int, server_address: str, headless: bool) -> list:
    app_path = resources.files("diamond_estimator").joinpath("app.py")
    cmd = [
        sys.executable, "-m", "streamlit", "run", str(app_path),
        "--server.port", str(port),
        "--server.address", server_address,
        "--browser.gatherUsageStats", "false",
    ]
    if headless:
        cmd += ["--server.headless", "true"]
    return cmd


def run_estimate(args) -> int:
    values = {k: getattr(args, k) for k in ("carat", "cut", "color", "clarity", "depth", "table")}
    errors = validate_diamond(values)
    if errors:
        for msg in errors.values():
            print(msg, file=sys.stderr)
        return 2

    result = predict_price(DiamondDescription.from_mapping(values))
    symbol = get_settings().currency_symbol
    print(f"Estimated price: {fmt_usd(result.prediction, symbol=symbol)}")
    print(f"Estimated range: {fmt_usd(result.lower_bound, symbol=symbol)} - {fmt_usd(result.upper_bound, symbol=symbol)}")
    return 0


def main(argv=None):
    configure_logging(get_settings())
    args = build_parser().parse_args(argv)

    if args.command == "estimate":
        sys.exit(run_estimate(args))

    settings = get_settings()
    port = getattr(args, "port", settings.port)
    address = getattr(args, "server_address", settings.server_address)
    headless = getattr(args, "headless", False)
    cmd = streamlit_command(port, address, headless)
    logger.info("Launching Streamlit on %s:%s", address, port)

    # Defer all runtime logging/serving to Streamlit
    sys.exit(subprocess.call(cmd))


if __name__ == "__main__":
    main()
