"""GraphiQL Renderer — the interactive document served instead of JSON.

Invariants:
    - Presets (query, variables, result) are embedded as JSON literals escaped
      for a <script> context: no '<', '>' or '&' survive unescaped
    - Variables and result are pre-stringified with 2-space indent, the way the
      editors display them
    - The page fetches by POSTing JSON to its own URL, keeping every query
      parameter except query/variables/operationName
"""

import json
from string import Template

_SCRIPT_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}

_PAGE = Template("""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <title>GraphiQL</title>
  <meta name="robots" content="noindex" />
  <style>
    body { margin: 0; height: 100vh; overflow: hidden; }
    #graphiql { height: 100vh; }
  </style>
  <link href="https://unpkg.com/graphiql@$graphiql_version/graphiql.min.css" rel="stylesheet" />
  <script src="https://unpkg.com/react@$react_version/umd/react.production.min.js"></script>
  <script src="https://unpkg.com/react-dom@$react_version/umd/react-dom.production.min.js"></script>
  <script src="https://unpkg.com/graphiql@$graphiql_version/graphiql.min.js"></script>
</head>
<body>
  <div id="graphiql">Loading...</div>
  <script>
    var parameters = {};
    window.location.search.substr(1).split('&').forEach(function (entry) {
      var eq = entry.indexOf('=');
      if (eq >= 0) {
        parameters[decodeURIComponent(entry.slice(0, eq))] =
          decodeURIComponent(entry.slice(eq + 1).replace(/\\+/g, ' '));
      }
    });

    function locationQuery(params) {
      return '?' + Object.keys(params).map(function (key) {
        return encodeURIComponent(key) + '=' + encodeURIComponent(params[key]);
      }).join('&');
    }

    var graphqlParamNames = { query: true, variables: true, operationName: true };
    var otherParams = {};
    for (var k in parameters) {
      if (parameters.hasOwnProperty(k) && graphqlParamNames[k] !== true) {
        otherParams[k] = parameters[k];
      }
    }
    var fetchURL = locationQuery(otherParams);

    function graphQLFetcher(graphQLParams) {
      return fetch(fetchURL, {
        method: 'post',
        headers: {
          'Accept': 'application/json',
          'Content-Type': 'application/json'
        },
        body: JSON.stringify(graphQLParams),
        credentials: 'include'
      }).then(function (response) {
        return response.json();
      });
    }

    function updateURL() {
      history.replaceState(null, null, locationQuery(parameters));
    }

    var root = ReactDOM.createRoot(document.getElementById('graphiql'));
    root.render(React.createElement(GraphiQL, {
      fetcher: graphQLFetcher,
      onEditQuery: function (q) { parameters.query = q; updateURL(); },
      onEditVariables: function (v) { parameters.variables = v; updateURL(); },
      onEditOperationName: function (n) { parameters.operationName = n; updateURL(); },
      query: $query,
      variables: $variables,
      response: $result,
      defaultEditorToolsVisibility: true
    }));
  </script>
</body>
</html>
""")


def script_literal(value) -> str:
    """JSON literal safe to place inside an inline <script>."""
    encoded = json.dumps(value)
    for char, escape in _SCRIPT_ESCAPES.items():
        encoded = encoded.replace(char, escape)
    return encoded


def _pretty_or_none(value) -> str | None:
    return json.dumps(value, indent=2) if value is not None else None


class GraphiQLRenderer:
    """InteractiveRenderer producing a GraphiQL page."""

    def __init__(self, graphiql_version: str, react_version: str):
        self.graphiql_version = graphiql_version
        self.react_version = react_version

    def render(
        self,
        query: str | None = None,
        variables: dict | None = None,
        result: dict | None = None,
    ) -> str:
        return _PAGE.substitute(
            graphiql_version=self.graphiql_version,
            react_version=self.react_version,
            query=script_literal(query),
            variables=script_literal(_pretty_or_none(variables)),
            result=script_literal(_pretty_or_none(result)),
        )
