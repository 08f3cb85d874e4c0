from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from anagram.engine import Engine, DictionaryNotLoaded
from anagram import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None

_MODES = ("all", "longest", "length")


def _error(msg: str, status: int):
    return jsonify({"error": msg}), status


# ---------- API ----------
@app.get("/api/words")
def api_words():
    q = request.args.get("q", "", type=str)
    mode = request.args.get("mode", "all", type=str)
    n = request.args.get("n", None, type=int)
    if mode not in _MODES:
        return _error(f"unknown mode {mode!r}; expected one of {', '.join(_MODES)}", 400)
    if mode == "length" and n is None:
        return _error("mode=length requires an integer n", 400)
    if _engine is None:
        return _error("engine not initialized", 409)

    if not q.strip():
        return jsonify({"query": "", "mode": mode, "length": n if mode == "length" else None,
                        "words": [], "elapsed_ms": 0.0})
    try:
        if mode == "longest":
            result = _engine.find_longest(q)
        elif mode == "length":
            result = _engine.find_by_exact_length(n, q)  # type: ignore[arg-type]
        else:
            result = _engine.find_all(q)
    except DictionaryNotLoaded as exc:
        return _error(str(exc), 409)
    return jsonify(result.to_dict())


@app.get("/api/health")
def api_health():
    eng = _engine
    return jsonify({
        "ok": True,
        "loaded": bool(eng and eng.loaded),
        "words": eng.size if eng else 0,
        "source": eng.source if eng else "",
    })


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: minimal CSS + JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Anagram Solver • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:760px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.controls{ display:flex; gap:12px; align-items:center; flex-wrap:wrap; }
input,select,button{ padding:10px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:15px; }
#q{ flex:1; min-width:220px }
#n{ width:70px }
.meta{ color:var(--muted); font-size:13px; margin-top:8px; }
#out{ margin-top:14px; columns:4 8rem; font-family:ui-monospace,Menlo,Consolas,monospace; }
.empty{ color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Anagram Solver</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Letters, word or phrase…" autocomplete="off" autofocus />
        <select id="mode">
          <option value="all">All words</option>
          <option value="longest">Longest word</option>
          <option value="length">Exact length</option>
        </select>
        <input id="n" type="number" min="1" value="3" />
        <button id="go">Find</button>
      </div>
      <div id="stats" class="meta">Ready.</div>
      <div id="out" class="empty">Enter some letters to see words.</div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
async function search(){
  const q = $("#q").value.trim(), mode = $("#mode").value, n = $("#n").value;
  if(!q){ $("#out").className = "empty"; $("#out").textContent = "Enter some letters to see words."; return; }
  let url = `/api/words?q=${encodeURIComponent(q)}&mode=${mode}`;
  if(mode === "length") url += `&n=${encodeURIComponent(n)}`;
  try{
    const resp = await fetch(url);
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error || `HTTP ${resp.status}`);
    $("#stats").textContent = `Words: ${data.words.length} • ${data.elapsed_ms} ms`;
    if(data.words.length === 0){ $("#out").className = "empty"; $("#out").textContent = "No words found."; return; }
    $("#out").className = "";
    // words come from the dictionary file: insert as text, never as markup
    $("#out").replaceChildren(...data.words.map(w => {
      const div = document.createElement("div");
      div.textContent = w;
      return div;
    }));
  }catch(e){
    $("#stats").textContent = `Error: ${e.message ?? e}`;
  }
}
$("#go").addEventListener("click", search);
$("#q").addEventListener("keydown", (ev) => { if(ev.key === "Enter") search(); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask UI on top of the anagram Engine")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--dict", default=None, help="Word list file (one word per line)")
    src.add_argument("--choice", choices=sorted(CFG.DICTIONARY_FILES), default=CFG.DEFAULT_CHOICE)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(verbose=args.verbose)
    try:
        if args.dict:
            _engine.load(args.dict)
        else:
            _engine.select(args.choice)
    except OSError as exc:
        ap.error(f"could not open dictionary: {exc}")

    log.info("Serving %d words from %s", _engine.size, _engine.source)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
