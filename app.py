from flask import Flask, jsonify, redirect, render_template, request, session, url_for

from zipcast.config import OPENWEATHERMAP_API_KEY, SECRET_KEY
from zipcast.models import ZIP_PARAM, Failure, LookupRequest
from zipcast.resolver import resolve
from zipcast.view import ViewController

app = Flask(__name__)
# Needed for the per‑browser view state (extra‑info toggle)
app.secret_key = SECRET_KEY
app.config["OPENWEATHERMAP_API_KEY"] = OPENWEATHERMAP_API_KEY

VIEW_STATE_KEY = "view"


def _status(outcome) -> int:
    # every failure kind is reported the same way
    return 500 if isinstance(outcome, Failure) else 200


async def _lookup(lookup: LookupRequest):
    app.logger.info("Resolving weather for ZIP %s...", lookup.postal_code)
    outcome = await resolve(lookup.postal_code, app.config["OPENWEATHERMAP_API_KEY"])
    if isinstance(outcome, Failure):
        app.logger.error("Error fetching weather data: %s", outcome.message)
    return outcome


@app.route("/", methods=["GET", "POST"])
async def index():
    if request.method == "POST":
        # --------------------------------------------------------------
        # Search submitted → publish the draft as ?zipCode=… and let the
        # follow‑up GET do the lookup
        # --------------------------------------------------------------
        controller = ViewController.from_state(session.get(VIEW_STATE_KEY), request.args)
        controller.draft_postal_code = request.form.get(ZIP_PARAM, "").strip()
        navigation = controller.on_submit()
        session[VIEW_STATE_KEY] = controller.to_state()
        anchor = "search" if navigation.preserve_scroll else None
        return redirect(url_for("index", _anchor=anchor, **navigation.params))

    lookup = LookupRequest.from_params(request.args)
    controller = ViewController.from_state(session.get(VIEW_STATE_KEY), request.args)
    outcome = await _lookup(lookup)
    view = controller.render(outcome, is_fetching=False)
    return render_template("index.html", view=view), _status(outcome)


@app.route("/extra", methods=["POST"])
def toggle_extra():
    # the page flips the block itself; this only remembers the choice
    controller = ViewController.from_state(session.get(VIEW_STATE_KEY), request.args)
    controller.toggle_extra_info()
    session[VIEW_STATE_KEY] = controller.to_state()
    return "", 204


@app.route("/api/weather")
async def weather_json():
    outcome = await _lookup(LookupRequest.from_params(request.args))
    return jsonify(outcome.to_dict()), _status(outcome)


@app.route("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.run(debug=True, host="0.0.0.0", port=5000)
