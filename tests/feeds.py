"""Sample feed documents shared by the test modules."""

RSS_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>Example News</title>
    <link>https://news.example.com/</link>
    <description>Top stories</description>
    <item>
      <title>Storm hits the coast</title>
      <link>https://news.example.com/storm</link>
      <description><![CDATA[<p>Heavy rain <b>expected</b> tonight.</p>]]></description>
      <category>World</category>
      <category>Weather</category>
      <content:encoded><![CDATA[<div><p>Full report &amp; pictures.</p></div>]]></content:encoded>
    </item>
    <item>
      <title>Markets rally</title>
      <link>https://news.example.com/markets</link>
      <description>Shares &amp;amp; bonds rose.</description>
      <category>Business</category>
    </item>
  </channel>
</rss>
"""

ATOM_FEED = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Tech</title>
  <link href="https://tech.example.com/" rel="alternate"/>
  <entry>
    <title>New phone released</title>
    <link rel="self" href="https://tech.example.com/api/phone"/>
    <link rel="alternate" href="https://tech.example.com/phone"/>
    <id>tag:tech.example.com,2024:phone</id>
    <summary type="html">&lt;p&gt;It is &lt;i&gt;thin&lt;/i&gt;.&lt;/p&gt;</summary>
    <content type="html">&lt;p&gt;Longer review text.&lt;/p&gt;</content>
    <category term="Tech" label="Technology"/>
    <category term="Tech">Technology</category>
    <category term="Mobile"/>
  </entry>
</feed>
"""

EMPTY_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Nothing here yet</title>
    <link>https://quiet.example.com/</link>
  </channel>
</rss>
"""

EMPTY_ATOM = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"><title>Quiet</title></feed>
"""

# Same story expressed in both dialects
TWIN_RSS = b"""<?xml version="1.0"?>
<rss version="2.0"><channel><title>Twin</title>
  <item>
    <title>Election results</title>
    <link>https://twin.example.com/election</link>
    <description>&lt;b&gt;Polls&lt;/b&gt; closed at 8pm.</description>
    <category>Politics</category>
    <category>World</category>
  </item>
</channel></rss>
"""

TWIN_ATOM = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"><title>Twin</title>
  <entry>
    <title>Election results</title>
    <link href="https://twin.example.com/election"/>
    <summary type="html">&lt;b&gt;Polls&lt;/b&gt; closed at 8pm.</summary>
    <category term="World"/>
    <category term="Politics"/>
  </entry>
</feed>
"""

TRUNCATED_RSS = b"""<?xml version="1.0"?>
<rss version="2.0"><channel><title>Broken</title>
  <item><title>First</title><link>https://broken.example.com/1</link></item>
  <item><title>Second</title><link>https://broken.example.com/2</link></item>
"""


def rss_with_titles(*titles):
    """Build a minimal RSS document with one item per title."""
    items = "".join(
        f"<item><title>{t}</title><link>https://example.com/{i}</link></item>"
        for i, t in enumerate(titles)
    )
    return f'<?xml version="1.0"?><rss version="2.0"><channel><title>x</title>{items}</channel></rss>'.encode()

# HTML named entities outside CDATA, which XML itself does not define
HTML_ENTITY_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>Entities</title>
  <item>
    <title>Caf&eacute; opens</title>
    <link>https://entities.example.com/cafe</link>
    <description>Tom&nbsp;&amp; Jerry &mdash; live</description>
    <category>Caf&eacute;s</category>
  </item>
</channel></rss>
"""

LATIN1_RSS = (
    b'<?xml version="1.0" encoding="ISO-8859-1"?>\n'
    b'<rss version="2.0"><channel><title>Latin</title>'
    b"<item><title>Caf\xe9 cr\xe8me</title>"
    b"<link>https://latin.example.com/1</link>"
    b"<description>Na\xefve &amp; s\xfbr</description></item>"
    b"</channel></rss>"
)
