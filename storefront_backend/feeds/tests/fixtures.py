# feeds/tests/fixtures.py

"""
Sample feed documents shared by the feed tests.
"""

GOOGLE_SHOPPING_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:g="http://base.google.com/ns/1.0">
  <channel>
    <title>Supplier</title>
    <item>
      <title>NVIDIA GeForce RTX 4090 24GB</title>
      <description>Flagship graphics card</description>
      <g:price>£12.34 GBP</g:price>
      <g:image_link>https://cdn.example.com/4090.jpg</g:image_link>
      <g:brand>NVIDIA</g:brand>
      <g:availability>in stock</g:availability>
      <g:product_type>Graphics Cards</g:product_type>
    </item>
    <item>
      <title>Noctua NH-D15</title>
      <g:price>99.95 GBP</g:price>
      <g:sale_price>89.95 GBP</g:sale_price>
      <g:availability>out_of_stock</g:availability>
      <g:product_type>CPU Air Cooler</g:product_type>
    </item>
  </channel>
</rss>
"""

ATOM_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Deals</title>
  <entry>
    <title>Corsair Vengeance DDR5 32GB</title>
    <summary>Fast memory kit</summary>
    <category term="RAM"/>
  </entry>
</feed>
"""

GENERIC_PRODUCTS = """<?xml version="1.0" encoding="UTF-8"?>
<products>
  <product>
    <name>Samsung 990 Pro 2TB</name>
    <description>NVMe SSD</description>
    <price>149.99</price>
    <compare_at_price>179.99</compare_at_price>
    <image>https://cdn.example.com/990.jpg</image>
    <vendor>Samsung</vendor>
    <category>Storage</category>
    <in_stock>false</in_stock>
  </product>
</products>
"""

RTX_ONLY_RSS = """<rss version="2.0" xmlns:g="http://base.google.com/ns/1.0">
  <channel>
    <item>
      <title>Gigabyte RTX 4090 Gaming OC</title>
      <g:price>1599.00 GBP</g:price>
      <g:product_type>RTX 4090 GPU</g:product_type>
    </item>
    <item>
      <title>Mystery Widget</title>
      <g:price>5.00 GBP</g:price>
      <g:product_type>Garden Furniture</g:product_type>
    </item>
  </channel>
</rss>
"""

EMPTY_RSS = """<rss version="2.0"><channel><title>Nothing</title></channel></rss>"""
