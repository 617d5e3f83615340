"""
Sample Finding API payloads shared by the tests
"""

ITEM_XML = """
    <item>
      <itemId>{item_id}</itemId>
      <title>{title}</title>
      <globalId>EBAY-US</globalId>
      <galleryURL>http://thumbs.ebaystatic.com/pict/{item_id}.jpg</galleryURL>
      <viewItemURL>http://www.ebay.com/itm/{item_id}</viewItemURL>
      <location>Los Angeles,CA,USA</location>
      <shippingInfo>
        <shippingServiceCost currencyId="USD">15.5</shippingServiceCost>
        <shippingType>Flat</shippingType>
        <shipToLocations>US</shipToLocations>
        <shipToLocations>CA</shipToLocations>
        <shipToLocations>GB</shipToLocations>
      </shippingInfo>
      <sellingStatus>
        <currentPrice currencyId="USD">{price}</currentPrice>
        <sellingState>Active</sellingState>
      </sellingStatus>
      <listingInfo>
        <buyItNowPrice currencyId="USD">1499.99</buyItNowPrice>
        <endTime>2012-03-04T18:23:10.000Z</endTime>
        <listingType>AuctionWithBIN</listingType>
      </listingInfo>
    </item>"""


def item_xml(item_id="110084112345", title="Pioneer DJM-900 Nexus", price="1250.0"):
    return ITEM_XML.format(item_id=item_id, title=title, price=price)


def search_response(root="findItemsByKeywordsResponse", items=(), timestamp="2012-02-27T21:14:54.401Z"):
    return f"""<?xml version='1.0' encoding='UTF-8'?>
<{root} xmlns="http://www.ebay.com/marketplace/search/v1/services">
  <ack>Success</ack>
  <version>1.12.0</version>
  <timestamp>{timestamp}</timestamp>
  <searchResult count="{len(items)}">{''.join(items)}
  </searchResult>
</{root}>""".encode('utf-8')


ERROR_RESPONSE = b"""<?xml version='1.0' encoding='UTF-8'?>
<errorMessage xmlns="http://www.ebay.com/marketplace/search/v1/services">
  <error>
    <errorId>11002</errorId>
    <domain>Security</domain>
    <severity>Error</severity>
    <category>System</category>
    <message>Authentication failed : Invalid Application: your_application_id_here</message>
    <subdomain>Authentication</subdomain>
  </error>
</errorMessage>"""
