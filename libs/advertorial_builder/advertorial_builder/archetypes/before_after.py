"""Archétype « before-after » : récit de transformation, parcours en trois étapes, preuves."""

COPY = {
    "Pain": {
        "headline": "\"I Was Ready to Give Up. Then I Found {product} — and Everything Changed.\"",
        "hook": "Eighteen months. That's how long I spent trying to solve a problem that seemed unsolvable. I bought the supplements. I tried the routines. I followed the advice. And every time, I ended up right back where I started — frustrated, exhausted, and quietly wondering if this was just my life now.",
        "discovery": "I almost didn't try <strong>{product}</strong>. By that point, I'd been burned too many times. But a friend — someone I trusted, someone who had struggled with the same thing — wouldn't stop recommending it. I finally caved. And within the first week, something was different.",
    },
    "Desire": {
        "headline": "How I Finally Achieved What I Always Wanted — With a Little Help From {product}",
        "hook": "I'd always imagined what it would feel like to actually achieve the result I was after. Not just \"improvement\" — but the real thing. The kind of outcome you see in before-and-after photos and think, \"that could never be me.\" I was wrong about that.",
        "discovery": "A close friend had been quietly using <strong>{product}</strong> for a few months. I noticed the change in her before she told me what she was doing. When she finally shared it, I was immediately interested. I ordered the same day.",
    },
    "Comparison": {
        "headline": "I Tried Everything First. Here's Why I Stopped Looking After Finding {product}",
        "hook": "I'm not impulsive. Before I spend money on anything, I research it thoroughly. I read every review, every study, every forum post I can find. So when I say I tried every major option in this space before landing on something that actually worked — I mean it.",
        "discovery": "I kept coming back to <strong>{product}</strong> in my research. The reviews were more specific than usual. The claims were more honest. The company was more transparent. After eliminating everything that didn't hold up under scrutiny, it was the clear choice.",
    },
}

SKELETON = [
    {"type": "authorByline", "author": "Jamie L.", "role": "Contributing Writer", "date": "{date}",
     "category": "Personal Experience", "publicationName": "Real Life Reviews",
     "viewCount": "41,293 views", "liveViewers": "312 reading now"},
    {"type": "headline", "text": "@headline", "size": "large"},
    {"type": "text", "content": "@hook", "variant": "large-intro"},
    {"type": "note", "text": "If any of this sounds familiar, keep reading. This is for you.", "style": "highlight"},
    {"type": "text", "content": "@discovery"},
    {"type": "image", "label": "{product} — Product Image", "hint": "Clean product photo on neutral background",
     "height": "340px", "rounded": True},
    {"type": "timeline", "heading": "My Journey with {product}", "steps": [
        {"label": "Week 1", "headline": "The First Signs",
         "body": "Subtle but unmistakable. I noticed changes I'd been chasing for over a year starting to appear. I told myself not to get excited — but it was hard not to."},
        {"label": "Week 2", "headline": "Something Real",
         "body": "By now I was certain this wasn't placebo. The results were building on each other. I started telling people around me what I was doing."},
        {"label": "Month 1", "headline": "A New Normal",
         "body": "What I'd always hoped for had become my everyday reality. {product} didn't just deliver — it changed what I thought was possible for me."},
    ]},
    {"type": "socialProof", "rating": "4.9", "reviewCount": "4,128 reviews", "customerCount": "80,000+ users"},
    {"type": "testimonials", "heading": "Others Who Made the Same Journey", "layout": "stacked", "showStars": True,
     "testimonials": [
         {"quote": "I had nearly identical results. The timeline was almost exactly the same. It works, and I'll be a customer for life.",
          "name": "Rachel D.", "detail": "Verified Buyer · 2 months in"},
         {"quote": "The difference between before and after is something I show people when they ask what changed. The photos say it all.",
          "name": "Tom W.", "detail": "Verified Buyer · 6 weeks in"},
     ]},
    {"type": "stats", "layout": "horizontal", "stats": [
        {"value": "92%",     "label": "reported meaningful improvement in week 1"},
        {"value": "4.9★",    "label": "average from 4,100+ verified reviews"},
        {"value": "60 days", "label": "money-back guarantee"},
    ]},
    {"type": "offerBox", "headline": "Your Before-and-After Story Starts Here",
     "subtext": "{product} comes with a 60-day money-back guarantee. If you don't see and feel the difference, you pay nothing.",
     "buttonText": "Start My Transformation", "discount": "★ Most Popular — Free Shipping Included",
     "guarantee": "60-Day Money-Back Guarantee", "urgency": "High demand — stock is limited"},
    {"type": "guarantee",
     "text": "60-Day Money-Back Guarantee — If you're not completely satisfied with your results, we'll refund your full purchase price. No forms, no hassle.",
     "badges": [
         {"icon": "🛡️", "label": "60-Day\nGuarantee"},
         {"icon": "🔒", "label": "Secure\nCheckout"},
         {"icon": "🚚", "label": "Free\nShipping"},
         {"icon": "⭐", "label": "4.9 Star\nRating"},
     ]},
    {"type": "faq", "heading": "Your Questions, Answered", "items": [
        {"question": "How soon will I see results with {product}?",
         "answer": "Most people notice a meaningful difference within the first 7–10 days. By the end of week two, the improvement is typically significant enough to notice without looking for it."},
        {"question": "What if it doesn't work for me?",
         "answer": "You're covered by a 60-day money-back guarantee. If {product} doesn't deliver the results you're looking for, contact us for a full refund — no questions, no hassle."},
        {"question": "Is this backed by research?",
         "answer": "Yes. {product} is formulated based on peer-reviewed research and tested independently for quality and purity. We stand behind both the science and the results."},
    ]},
    {"type": "comments", "heading": "Recent Comments", "comments": [
        {"name": "Sarah K.", "timeAgo": "3 days ago", "isVerified": True, "likes": "47",
         "text": "I started {product} three weeks ago and the difference is real. I keep catching myself thinking \"wait, this is what normal feels like?\" — and that's the best way I can describe it."},
        {"name": "Marcus T.", "timeAgo": "1 week ago", "isVerified": True, "likes": "38",
         "text": "Been using it for six weeks. The before-and-after isn't even close. Wish I'd found this a year ago."},
        {"name": "Nadia R.", "timeAgo": "5 days ago", "isVerified": False, "likes": "29",
         "text": "Skeptic turned believer. That's all I'll say. The results are undeniable."},
    ]},
    {"type": "disclaimer",
     "text": "This is a sponsored personal account. Individual results will vary. The experiences described are not typical and are presented for illustrative purposes only. This content is not intended to constitute medical advice. Please consult a qualified healthcare professional before beginning any new supplement or health program."},
]

ARCHETYPE = {
    "id":            "before-after",
    "name":          "Before & After",
    "description":   "Emotional transformation story. Hooks with a relatable struggle, takes readers on a journey, and converts with authentic testimonials.",
    "default_angle": "Pain",
    "copy":          COPY,
    "skeleton":      SKELETON,
}
