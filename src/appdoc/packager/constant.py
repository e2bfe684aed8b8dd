PDF_HEADER_HTML = (
    '<div class="document-header">'
    '<span class="document-header__title">Application Summary</span>'
    '</div>'
)

# wkhtmltopdf renders the header document once per page and passes the page
# number in the query string. Non-first pages blank out the header body.
FIRST_PAGE_ONLY_SCRIPT = """<script>
function firstPageOnly() {
  var params = {};
  document.location.search.substring(1).split('&').forEach(function (pair) {
    var kv = pair.split('=', 2);
    params[kv[0]] = decodeURIComponent(kv[1] || '');
  });
  if (params.page && params.page !== '1') {
    document.body.innerHTML = '';
  }
}
</script>"""

HEADER_DOCUMENT = """<!DOCTYPE html>
<html><head><meta charset="utf-8">{script}</head>
<body style="margin:0" onload="{onload}">{header_html}</body></html>"""

PAGE_NUMBER_FORMAT = "[page]"
