"""
Pytest configuration and fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("MOCK_FETCH_LATENCY_SECONDS", "0.01")


BLOGML_DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<blog xmlns="http://www.blogml.com/2006/09/BlogML"
      xmlns:slash="http://purl.org/rss/1.0/modules/slash/"
      date-created="2006-09-05T11:35:00Z" root-url="http://example.org/weblog/">
  <title type="text">Example Weblog</title>
  <sub-title type="text">Notes on syndication</sub-title>
  <authors>
    <author id="2100" date-created="2006-09-05T11:35:00Z" date-modified="2006-09-05T11:35:00Z"
            approved="true" email="jane@example.org">
      <title type="text">Jane Doe</title>
    </author>
  </authors>
  <extended-properties>
    <property name="CommentModeration" value="Anonymous" />
    <property name="SendTrackback" value="yes" />
  </extended-properties>
  <categories>
    <category id="1018" date-created="2006-09-05T11:35:00Z" date-modified="2006-09-05T11:35:00Z"
              approved="true" description="General" parentref="0">
      <title type="text">General</title>
    </category>
  </categories>
  <posts>
    <post id="34" date-created="2006-09-05T11:36:50Z" date-modified="2006-09-05T11:36:50Z"
          approved="true" post-url="http://example.org/weblog/34" type="normal" hasexcerpt="true" views="12">
      <title type="text">First post</title>
      <content type="html">&lt;p&gt;Hello&lt;/p&gt;</content>
      <post-name type="text">first-post</post-name>
      <excerpt type="text">Hello</excerpt>
      <comments>
        <comment id="35" date-created="2006-09-05T12:00:00Z" date-modified="2006-09-05T12:00:00Z"
                 approved="false" user-name="Reader" user-email="reader@example.org"
                 user-url="http://reader.example.org/">
          <title type="text">Re: First post</title>
          <content type="text">Nice one</content>
        </comment>
      </comments>
      <trackbacks>
        <trackback id="36" date-created="2006-09-05T12:10:00Z" approved="true" url="http://other.example.org/post">
          <title type="text">Linked</title>
        </trackback>
      </trackbacks>
      <categories>
        <category ref="1018" />
      </categories>
      <authors>
        <author ref="2100" />
      </authors>
      <attachments>
        <attachment embedded="false" mime-type="image/png" size="2048" url="http://example.org/a.png" />
      </attachments>
      <slash:section>articles</slash:section>
      <slash:comments>1</slash:comments>
    </post>
  </posts>
</blog>
"""

# One post, one comment, and one element from a namespace nothing registers by default.
BLOGML_SCENARIO = """<?xml version="1.0" encoding="utf-8"?>
<blog xmlns="http://www.blogml.com/2006/09/BlogML" xmlns:wfw="http://wellformedweb.org/CommentAPI/"
      root-url="http://example.org/weblog/">
  <title type="text">Scenario</title>
  <posts>
    <post id="1" post-url="http://example.org/weblog/1">
      <title type="text">Only post</title>
      <content type="text">Body</content>
      <comments>
        <comment id="2" user-name="Reader">
          <title type="text">Only comment</title>
          <content type="text">Comment body</content>
          <wfw:commentRss>http://example.org/weblog/1/comments/rss</wfw:commentRss>
        </comment>
      </comments>
    </post>
  </posts>
</blog>
"""

APML_DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<APML xmlns="http://www.apml.org/apml-0.6" version="0.6">
  <Head>
    <Title>Example APML file for apml.org</Title>
    <Generator>Written by Hand</Generator>
    <UserEmail>sample@apml.org</UserEmail>
    <DateCreated>2007-03-11T01:55:00Z</DateCreated>
  </Head>
  <Body defaultprofile="Work">
    <Profile name="Home">
      <ImplicitData>
        <Concepts>
          <Concept key="attention" value="0.99" from="GatheringTool.com" updated="2007-03-11T01:55:00Z" />
          <Concept key="content distribution" value="0.97" from="GatheringTool.com" updated="2007-03-11T01:55:00Z" />
        </Concepts>
        <Sources>
          <Source key="http://feeds.feedburner.com/apmlspec" name="APML.org" value="1.00"
                  type="application/rss+xml" from="GatheringTool.com" updated="2007-03-11T01:55:00Z">
            <Author key="Sample" value="0.5" from="GatheringTool.com" updated="2007-03-11T01:55:00Z" />
          </Source>
        </Sources>
      </ImplicitData>
      <ExplicitData>
        <Concepts>
          <Concept key="direct attention" value="0.99" />
        </Concepts>
        <Sources>
          <Source key="http://feeds.feedburner.com/TechCrunch" name="Techcrunch" type="application/rss+xml" value="0.4">
            <Author key="ExplicitSample" value="0.5" />
          </Source>
        </Sources>
      </ExplicitData>
    </Profile>
    <Profile name="Work">
      <ExplicitData>
        <Concepts>
          <Concept key="Golf" value="-0.20" />
        </Concepts>
      </ExplicitData>
    </Profile>
    <Applications>
      <Application name="sample.com" />
    </Applications>
  </Body>
</APML>
"""


@pytest.fixture
def blogml_payload() -> bytes:
    return BLOGML_DOCUMENT.encode("utf-8")


@pytest.fixture
def blogml_scenario_payload() -> bytes:
    return BLOGML_SCENARIO.encode("utf-8")


@pytest.fixture
def apml_payload() -> bytes:
    return APML_DOCUMENT.encode("utf-8")


@pytest.fixture(scope="session", autouse=True)
def structured_logging():
    """Configure structlog once, the way an application would at startup."""
    from core.logging import configure_logging

    configure_logging()
