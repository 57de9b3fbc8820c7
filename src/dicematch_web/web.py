from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from dicematch import config as CFG
from dicematch.engine import Engine
from dicematch.matching import validate_cutoff, validate_top_n, dice_coefficient, top_matches

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None


def _bad_request(msg: str):
    return jsonify({"error": msg}), 400


@app.errorhandler(ValueError)
def _on_value_error(e: ValueError):
    return _bad_request(str(e))


@app.errorhandler(TypeError)
def _on_type_error(e: TypeError):
    return _bad_request(str(e))


# ---------- API ----------
@app.get("/health")
def health():
    n = _engine.count() if _engine else 0
    return jsonify({"ok": True, "candidates": n})


@app.get("/api/similarity")
def api_similarity():
    a = request.args.get("a", "", type=str)
    b = request.args.get("b", "", type=str)
    return jsonify({"a": a, "b": b, "score": dice_coefficient(a, b)})


@app.get("/api/match")
def api_match():
    q = request.args.get("q", "", type=str)
    raw_k = request.args.get("k")
    raw_cutoff = request.args.get("cutoff")
    try:
        k = CFG.TOP_N if raw_k is None else int(raw_k)
        cutoff = CFG.CUTOFF if raw_cutoff is None else float(raw_cutoff)
    except ValueError:
        return _bad_request(f"k must be an int and cutoff a number, got k={raw_k!r} cutoff={raw_cutoff!r}")
    # validate even when there is nothing to match against
    k = validate_top_n(k)
    cutoff = validate_cutoff(cutoff)
    if _engine is None or _engine.count() == 0:
        return jsonify([])
    rows = _engine.match(q, top_n=k, cutoff=cutoff)
    return jsonify([r.to_dict() for r in rows])


@app.post("/api/match")
def api_match_adhoc():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return _bad_request("expected a JSON object body")
    query = body.get("query", "")
    candidates = body.get("candidates")
    if not isinstance(candidates, list):
        return _bad_request("'candidates' must be a list of strings")
    rows = top_matches(
        query,
        candidates,
        top_n=body.get("top_n", CFG.TOP_N),
        cutoff=body.get("cutoff", CFG.CUTOFF),
    )
    return jsonify([r.to_dict() for r in rows])


# ---------- UI ----------
@app.get("/")
def home():
    # Single page: minimal CSS + JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Dice Match</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:860px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.controls{ display:flex; gap:12px; align-items:center; flex-wrap:wrap; }
input{ padding:10px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); }
#q{ flex:1; min-width:240px }
.row{ display:grid; grid-template-columns:3rem 6rem 1fr; gap:10px; padding:10px 14px; border-top:1px solid var(--border); }
.head{ font-weight:600; color:var(--muted) }
.empty{ padding:24px; text-align:center; color:var(--muted); }
.mono{ font-family: ui-monospace, Menlo, Consolas, monospace }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Dice Match</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Type a query…" autocomplete="off" autofocus />
        <label>Top-N <input id="k" type="number" min="0" value="10" class="mono" style="width:70px" /></label>
        <label>Cutoff <input id="c" type="number" min="0" max="1" step="0.05" value="0" class="mono" style="width:80px" /></label>
      </div>
      <div id="stats" class="head" style="margin-top:8px">Ready.</div>
      <div class="row head"><div>#</div><div>Score</div><div>Candidate</div></div>
      <div id="out" class="empty">Start typing to see matches.</div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const q = $("#q"), k = $("#k"), c = $("#c"), out = $("#out"), stats = $("#stats");
let t;
function esc(s){ return String(s).replace(/[&<>"]/g, (ch)=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[ch])); }
async function search(){
  const query = q.value;
  if(!query.trim()){ out.className="empty"; out.innerHTML="Start typing to see matches."; stats.textContent="Ready."; return; }
  const resp = await fetch(`/api/match?q=${encodeURIComponent(query)}&k=${parseInt(k.value||"0",10)}&cutoff=${parseFloat(c.value||"0")}`);
  const data = await resp.json();
  if(!resp.ok){ stats.textContent = `Error: ${data.error ?? resp.status}`; return; }
  stats.textContent = `Results: ${data.length}`;
  if(data.length === 0){ out.className="empty"; out.innerHTML="No matches."; return; }
  out.className = "";
  out.innerHTML = data.map((r,i)=>`<div class="row"><div>${i+1}</div><div class="mono">${r.score.toFixed(4)}</div><div>${esc(r.item)}</div></div>`).join("");
}
function debounced(){ clearTimeout(t); t = setTimeout(search, 150); }
q.addEventListener("input", debounced); k.addEventListener("change", debounced); c.addEventListener("change", debounced);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the Dice matcher")
    ap.add_argument("--roots", nargs="+", default=[], help="Files/folders with one candidate per line")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    global _engine
    _engine = Engine()
    if args.roots:
        _engine.load(args.roots, verbose=args.verbose)
    else:
        log.info("No --roots given; /api/match GET will return [] until candidates are loaded")

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
