from sanic import Sanic
from sanic.response import json, text
from sanic_cors import CORS

from votingledger import config
from votingledger.client import LedgerClient
from votingledger.crypto import Wallet
from votingledger.exceptions import LedgerError, NotFound, Unauthorized, AlreadyVoted, NoCandidates
from votingledger.ledger import candidate_to_dict
from votingledger.logger import get_logger

log = get_logger('Webserver')

app = Sanic('votingledger')

CORS(app, automatic_options=True)

wallet = Wallet(seed=config.OWNER_SEED)
client = LedgerClient(signer=wallet.verifying_key, total_supply=config.TOTAL_SUPPLY)

ERROR_STATUS = {
    NotFound: 404,
    NoCandidates: 404,
    Unauthorized: 403,
    AlreadyVoted: 409,
}


def error_response(e: LedgerError):
    return json({'error': str(e), 'type': type(e).__name__}, status=ERROR_STATUS.get(type(e), 400))


def malformed(*fields):
    return json({'error': 'malformed payload, expected {}'.format(', '.join(fields)), 'type': 'MalformedPayload'},
                status=400)


def payload_for(request, *fields):
    payload = request.json

    if not isinstance(payload, dict) or any(payload.get(f) is None for f in fields):
        return None

    return payload


@app.route("/", methods=["GET",])
async def index(request):
    return text("I\'m a teapot", status=418)


@app.route('/methods', methods=['GET'])
async def get_methods(request):
    methods = [{'name': name, 'arguments': kwargs} for name, kwargs, _ in client.functions]
    return json({'methods': methods}, status=200)


@app.route('/supply', methods=['GET'])
async def get_supply(request):
    return json({'total_supply': client.ledger.total_supply()})


@app.route('/balances/<identity>', methods=['GET'])
async def get_balance(request, identity):
    try:
        balance = client.ledger.balance_of(identity=identity)
    except LedgerError as e:
        return error_response(e)
    return json({'identity': identity, 'balance': balance})


@app.route('/allowances/<owner>/<spender>', methods=['GET'])
async def get_allowance(request, owner, spender):
    try:
        allowance = client.ledger.allowance(owner=owner, spender=spender)
    except LedgerError as e:
        return error_response(e)
    return json({'owner': owner, 'spender': spender, 'allowance': allowance})


# Expects json object such that:
'''
{
    'sender': 'string',
    'to': 'string',
    'amount': int
}
'''
@app.route('/transfer', methods=['POST'])
async def transfer(request):
    fields = ('sender', 'to', 'amount')
    payload = payload_for(request, *fields)
    if payload is None:
        return malformed(*fields)

    try:
        client.connect(payload['sender']).transfer(to=payload['to'], amount=payload['amount'])
    except LedgerError as e:
        return error_response(e)

    return json({'success': True}, status=200)


@app.route('/approve', methods=['POST'])
async def approve(request):
    fields = ('sender', 'spender', 'amount')
    payload = payload_for(request, *fields)
    if payload is None:
        return malformed(*fields)

    try:
        client.connect(payload['sender']).approve(spender=payload['spender'], amount=payload['amount'])
    except LedgerError as e:
        return error_response(e)

    return json({'success': True}, status=200)


@app.route('/transfer_from', methods=['POST'])
async def transfer_from(request):
    fields = ('sender', 'source', 'to', 'amount')
    payload = payload_for(request, *fields)
    if payload is None:
        return malformed(*fields)

    try:
        client.connect(payload['sender']).transfer_from(source=payload['source'], to=payload['to'],
                                                        amount=payload['amount'])
    except LedgerError as e:
        return error_response(e)

    return json({'success': True}, status=200)


@app.route('/candidates', methods=['GET'])
async def get_candidate_ids(request):
    return json({'candidates': client.ledger.get_candidate_ids()})


@app.route('/candidates', methods=['POST'])
async def add_candidate(request):
    fields = ('sender', 'name')
    payload = payload_for(request, *fields)
    if payload is None:
        return malformed(*fields)

    try:
        candidate_id = client.connect(payload['sender']).add_candidate(name=payload['name'])
    except LedgerError as e:
        return error_response(e)

    return json({'id': candidate_id}, status=200)


@app.route('/candidates/<candidate_id:int>', methods=['GET'])
async def get_candidate(request, candidate_id):
    try:
        candidate = client.ledger.get_candidate(candidate_id=candidate_id)
    except LedgerError as e:
        return error_response(e)

    return json(candidate_to_dict(candidate), status=200)


@app.route('/vote', methods=['POST'])
async def vote(request):
    fields = ('sender', 'candidate_id', 'proof')
    payload = payload_for(request, *fields)
    if payload is None:
        return malformed(*fields)

    try:
        client.connect(payload['sender']).vote(candidate_id=payload['candidate_id'], proof=payload['proof'])
    except LedgerError as e:
        return error_response(e)

    return json({'success': True}, status=200)


@app.route('/voters/<identity>', methods=['GET'])
async def has_voted(request, identity):
    try:
        voted = client.ledger.has_voted(identity=identity)
    except LedgerError as e:
        return error_response(e)

    return json({'identity': identity, 'voted': voted})


@app.route('/winner', methods=['GET'])
async def get_winner(request):
    try:
        winner = client.ledger.get_winner()
    except LedgerError as e:
        return error_response(e)

    return json(candidate_to_dict(winner), status=200)


@app.route('/standings', methods=['GET'])
async def get_standings(request):
    return json({'standings': [candidate_to_dict(c) for c in client.ledger.standings()]})


def start_webserver():
    log.info('Serving ledger owned by {} on {}:{}'.format(wallet.verifying_key, config.WEB_SERVER_HOST,
                                                          config.WEB_SERVER_PORT))
    app.run(host=config.WEB_SERVER_HOST, port=config.WEB_SERVER_PORT, workers=config.NUM_WORKERS, debug=False,
            access_log=False, single_process=True)


if __name__ == '__main__':
    start_webserver()
