"""Built-in page header (Jinja2 template)."""

DEFAULT_HEADER = """<!DOCTYPE html>
<head>
  <link rel="stylesheet" type="text/css" href="stylesheets/styles.css">
  <meta charset='utf-8'>
  <title>{{ package | default("API") }} documentation</title>
</head>

<!--  Style overrides -->
<style>
  dl dd {
    font-style: normal;
  }
  #api {
    padding-left: 20px;
  }
</style>

<body>
<div id="api">
"""
