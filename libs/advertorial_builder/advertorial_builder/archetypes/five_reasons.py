"""Archétype « five-reasons » : listicle « 5 Reasons » prêt à éditer, lisible sur mobile."""

_LABELS = ["Reason One", "Reason Two", "Reason Three", "Reason Four", "Reason Five"]

COPY = {
    "Pain": {
        "headline": "5 Reasons {product} Is Finally Solving the Problem Others Ignore",
        "intro": "If you've been searching for something that actually works, you know how frustrating it is. Most options are either overpriced, ineffective, or both. After thousands of customer experiences, here's why <strong>{product}</strong> consistently rises to the top.",
        "reasons": [
            ["Built for Real Problems", "Most products promise solutions but were designed by people who've never experienced the problem firsthand. <strong>{product}</strong> was engineered from real customer feedback — which is why it actually delivers."],
            ["Results You Feel Fast", "Within the first week, most users notice a meaningful difference. Not a subtle \"maybe\" — a real, tangible change that makes you wonder why you waited this long."],
            ["No Complicated Routines", "Forget the six-step systems that nobody sticks to. <strong>{product}</strong> integrates seamlessly into your existing routine. Simple, effective, and sustainable."],
            ["Better Value Over Time", "While cheaper alternatives seem appealing upfront, they end up costing more — in repeat purchases, wasted time, and continued frustration. <strong>{product}</strong> is the last investment you'll need to make."],
            ["Backed by a Real Guarantee", "When a company stands behind its product with a no-questions-asked money-back guarantee, that tells you everything. They're confident it works. You can be too."],
        ],
    },
    "Desire": {
        "headline": "5 Reasons Everyone Is Switching to {product} Right Now",
        "intro": "The best products don't just solve problems — they improve your life in ways you didn't expect. <strong>{product}</strong> has earned a loyal following by doing exactly that. Here's why it's earning five-star reviews across the board.",
        "reasons": [
            ["Exceptional Quality You Can Feel", "From the first moment you use <strong>{product}</strong>, the quality is unmistakable. Every detail has been thoughtfully designed — not just to look good, but to perform brilliantly."],
            ["Results That Exceed Expectations", "Customers consistently say the same thing: they expected improvement, but not this much, this fast. <strong>{product}</strong> delivers beyond what most products even claim."],
            ["Designed for Your Lifestyle", "The best products fit your life — not the other way around. <strong>{product}</strong> was built to integrate naturally into your daily routine, making it easy to stay consistent."],
            ["A Community That Loves It", "With thousands of five-star reviews and a passionate customer base, <strong>{product}</strong> isn't just a product — it's a decision other people are thrilled they made."],
            ["Zero-Risk to Try", "A genuine money-back guarantee means there's nothing to lose and everything to gain. The only regret most customers have is not trying it sooner."],
        ],
    },
    "Comparison": {
        "headline": "5 Reasons {product} Beats Every Alternative on the Market",
        "intro": "We put <strong>{product}</strong> head-to-head against the market's leading alternatives. The results were clear. Here's exactly how it stacks up — and why so many customers are making the switch.",
        "reasons": [
            ["Superior Quality at Every Level", "Side-by-side, the quality difference is obvious. While competitors cut corners on materials and design, <strong>{product}</strong> invests where it matters — delivering a noticeably premium experience."],
            ["Better Results, Proven by Customers", "When customers switch to <strong>{product}</strong> from alternatives, the feedback is consistent: better outcomes, faster. Not marginal improvement — a clear step up."],
            ["Simpler, More Effective Solution", "Alternatives often require complicated systems or multiple add-ons. <strong>{product}</strong> handles everything in one clean, simple solution that actually works the way it's supposed to."],
            ["More Transparent and Trustworthy", "Real ingredients, honest claims, and a company that answers questions. In a category full of vague promises, <strong>{product}</strong> stands out for saying exactly what it does — and delivering it."],
            ["Unbeatable Value and Guarantee", "When you factor in quality, longevity, and results, <strong>{product}</strong> wins on value — and the money-back guarantee removes any remaining risk."],
        ],
    },
}

SKELETON = [
    {"type": "authorByline", "author": "Editorial Team", "role": "Product Review Desk", "date": "{date}",
     "category": "Product Reviews", "publicationName": "The Insider Review",
     "viewCount": "28,419 views", "liveViewers": "183 reading now"},
    {"type": "headline", "text": "@headline", "size": "large", "align": "left",
     "subheadline": "Updated {date} · Verified customer ratings included"},
    {"type": "socialProof", "rating": "4.9", "reviewCount": "3,847 reviews", "customerCount": "75,000+ customers"},
    {"type": "text", "content": "@intro", "variant": "large-intro"},
    {"type": "cta", "style": "inline", "variant": "solid", "headline": "", "subtext": "",
     "buttonText": "Check Availability →"},
    *[
        {"type": "numberedSection", "number": f"{i + 1:02d}", "label": label,
         "headline": f"@reasons.{i}.0", "body": f"@reasons.{i}.1"}
        for i, label in enumerate(_LABELS)
    ],
    {"type": "testimonials", "heading": "What Customers Are Saying", "layout": "grid", "showStars": True,
     "testimonials": [
         {"quote": "I was skeptical at first, but the results speak for themselves. Exactly what I needed.",
          "name": "Sarah M.", "detail": "Verified Buyer · 3 weeks ago"},
         {"quote": "Tried everything else first. Wish I'd found this sooner — it's the only one that actually works.",
          "name": "James T.", "detail": "Verified Buyer · 1 month ago"},
         {"quote": "Five stars without hesitation. My whole family uses it now.",
          "name": "Priya K.", "detail": "Verified Buyer · 2 weeks ago"},
     ]},
    {"type": "offerBox", "headline": "Try {product} Risk-Free Today",
     "subtext": "Join over 75,000 satisfied customers and experience the difference for yourself. Limited stock available.",
     "buttonText": "Get {product} Now", "discount": "🎁 SPECIAL OFFER — Save 20%",
     "guarantee": "60-Day Money-Back Guarantee", "urgency": "Only 47 units left at this price"},
    {"type": "featureList", "heading": "What's Included with {product}", "items": [
        "Premium-quality {product}",
        "Free express shipping on all orders",
        "60-day no-questions-asked refund policy",
        "Access to exclusive customer community",
        "Dedicated customer support team",
    ]},
    {"type": "disclaimer",
     "text": "This article is sponsored content. Individual results may vary. The statements on this page have not been evaluated by the FDA. This product is not intended to diagnose, treat, cure, or prevent any disease. Always consult with a qualified healthcare professional before starting any new regimen."},
]

ARCHETYPE = {
    "id":            "five-reasons",
    "name":          "Listicle",
    "description":   "Numbered \"5 Reasons\" format. Easy to scan, compelling on mobile. Perfect for showcasing key benefits or differentiators.",
    "default_angle": "Desire",
    "copy":          COPY,
    "skeleton":      SKELETON,
}
