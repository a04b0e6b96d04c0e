"""Walk through the Trade Me OAuth handshake from the command line.

Reads the consumer key/secret from TRADEME_CONSUMER_KEY and
TRADEME_CONSUMER_SECRET (or .env), then prints the final token pair to store
as TRADEME_OAUTH_TOKEN / TRADEME_OAUTH_TOKEN_SECRET.

    python scripts/oauth_handshake.py --sandbox
"""

import argparse
import logging

from trademe import TokenPair, TradeMeClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--sandbox", action="store_true", help="use tmsandbox.co.nz")
    parser.add_argument("--read-only", action="store_true", help="request the read scope only")
    args = parser.parse_args()

    options = {"sandbox": True} if args.sandbox else {}
    client = TradeMeClient(options)

    scopes = [TradeMeClient.SCOPE_READ]
    if not args.read_only:
        scopes.append(TradeMeClient.SCOPE_WRITE)

    temp = TokenPair.from_response(client.get_temporary_access_tokens(scopes))

    print("Point your browser to:", client.get_access_token_verifier_url(temp.token))
    verifier = input("Verifier (oauth_verifier from the callback): ").strip()

    final = TokenPair.from_response(
        client.get_final_access_tokens(
            {
                "temp_token": temp.token,
                "temp_token_secret": temp.token_secret,
                "token_verifier": verifier,
            }
        )
    )
    logger.info("Handshake complete")
    print("TRADEME_OAUTH_TOKEN=" + final.token)
    print("TRADEME_OAUTH_TOKEN_SECRET=" + final.token_secret)


if __name__ == "__main__":
    main()
