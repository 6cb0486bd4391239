"""
Archétype « personal-story » : native ad long format à la première personne,
quatre offres successives avec barre de garantie, mise à jour stock, commentaires.
"""
from .common import PREMADE_DISCLAIMER

_TRUST_BAR = "🔬 Recommended by Experts · 🛡️ 60 Day Money-Back Guarantee · 🚚 Free Shipping"

COPY = {
    "Pain": {
        "headline": "It's Time To <mark>Stop Settling for Less</mark>! How My Frustrating Experience Led Me to Discover {product}",
        "hook": "I never thought I'd be writing this story…<br><br>But when you've spent <strong>years dealing with the same frustrating problem</strong> and nothing seems to work… you'll do anything to find a real solution.<br><br>I tried <strong>EVERYTHING</strong> money could buy. Expensive alternatives. Popular brands. Recommended solutions. Special treatments.<br><br>You name it, I bought it. My shelves were filled with products that didn't deliver, leaving me with an empty wallet and the same old frustrations.<br><br>Until everything changed with one shocking discovery…<br><br>And it had absolutely nothing to do with what I'd been trying before.",
        "problemHeading": "The Hidden Problem Nobody Talks About",
        "problemBody": "Here's what most people don't realize…<br><br>The reason your current solution isn't working has nothing to do with <strong>how much you're spending</strong> or how hard you're trying. The real problem runs deeper than that.<br><br>Most products in this space are designed for the <strong>average case</strong>. They look great in marketing but are built on outdated approaches that simply don't address the root cause.<br><br>The statistics are alarming:<br><br>• <strong>Over 80% of people</strong> report being unsatisfied with their current solution<br>• <strong>The average person wastes hundreds of dollars</strong> trying different products before finding one that works<br>• <strong>Most alternatives only treat symptoms</strong> — they never address the underlying issue<br><br>And the worst part? <strong>You've been blaming yourself</strong> when the products were the problem all along.",
        "consequenceHeading": "What Happens If You Don't Act Now",
        "consequenceBody": "If you keep using what you're using now, here's what you can expect:<br><br><strong>The problem will only get worse.</strong> Most solutions provide diminishing returns over time. What worked \"okay\" six months ago is probably working less now — and it'll be even worse six months from now. The underlying issue compounds when it's not properly addressed.<br><br><strong>You'll keep wasting money.</strong> The average person spends a small fortune cycling through products that don't work. Every purchase that disappoints is money you'll never get back — money that could have gone toward something that actually delivers.<br><br><strong>The frustration will continue.</strong> That feeling of \"maybe this one will be different\" followed by inevitable disappointment? It doesn't have to be your reality. There IS something that actually works.",
        "solutionHeading": "How {product} Was Born — And Why It Actually Works",
        "solutionBody": "When the founders discovered the truth about why existing solutions fail, building something better became their <strong>obsession</strong>.<br><br>They tried every product on the market. The cheap options were worthless. The expensive brands were overpriced and underwhelming.<br><br>So they decided to build what the market couldn't provide. <strong>{product}</strong> was designed from the ground up to solve the specific problems that other products ignore.<br><br>Every detail — from the core technology to the materials to the user experience — was carefully engineered to deliver <strong>real, lasting results</strong>.<br><br>Today, <strong>thousands of customers</strong> across the country have made the switch. And the feedback has been overwhelming.",
    },
    "Desire": {
        "headline": "I Finally Found <mark>The Secret to Real Results</mark>! Why {product} Is Changing Everything",
        "hook": "I still remember the exact moment everything changed…<br><br>After years of searching for something that actually <strong>delivers on its promises</strong>, I'd almost given up hope. The market is flooded with products that look amazing in ads but fall apart in real life.<br><br>Then a friend told me about <strong>{product}</strong>. I was skeptical — I'd heard it all before. But what happened next completely changed my perspective.<br><br>Within the first week, I noticed a difference. By the end of the month, I was telling everyone I knew.",
        "problemHeading": "Why Most Solutions Fall Short (And What's Different Here)",
        "problemBody": "Here's the thing most brands won't tell you…<br><br>The industry is built on <strong>repeat purchases</strong>. Products are designed to provide temporary relief — just enough to keep you coming back, but never enough to truly solve the problem.<br><br><strong>{product}</strong> was built on a completely different philosophy. Instead of masking the issue, it addresses the <strong>root cause</strong>. That's why the results are so dramatic — and why customers rarely go back to their old routine.<br><br>The numbers speak for themselves:<br><br>• <strong>97% of users report noticeable improvement</strong> within the first week<br>• <strong>4.8 out of 5 stars</strong> across thousands of verified reviews<br>• <strong>Over 89% of customers</strong> say it's the best product they've ever tried in this category",
        "consequenceHeading": "What Makes This Different From Everything Else",
        "consequenceBody": "What sets <strong>{product}</strong> apart comes down to three things:<br><br><strong>1. It addresses the root cause.</strong> Instead of providing a temporary fix, it solves the actual underlying problem. That's why results come fast and last long.<br><br><strong>2. Premium quality at every level.</strong> From the materials to the design to the packaging — you can feel the difference the moment you hold it. This isn't a product that cuts corners.<br><br><strong>3. Real people, real results.</strong> The customer stories aren't fabricated. The reviews aren't bought. When you see thousands of people saying the same thing, it's because the product genuinely delivers.",
        "solutionHeading": "Meet {product}: The Product Thousands Are Calling a \"Game Changer\"",
        "solutionBody": "<strong>{product}</strong> isn't just another product in a crowded market. It represents a fundamentally different approach to solving this problem.<br><br>Where other brands focus on marketing, the team behind {product} focused on <strong>engineering</strong>. Where competitors cut corners, they invested in <strong>quality</strong>. Where the industry accepts \"good enough,\" they demanded <strong>exceptional</strong>.<br><br>The result is a product that doesn't just meet expectations — it <strong>exceeds them dramatically</strong>.<br><br>And the numbers prove it: <strong>over 250,000 satisfied customers</strong> and counting.",
    },
    "Comparison": {
        "headline": "I Tested <mark>Every Option on the Market</mark>. Here's The One That Actually Works",
        "hook": "Let me save you months of research and hundreds of dollars in wasted purchases…<br><br>I've spent the last year <strong>testing every major option on the market</strong>. Side by side. No sponsorships. No bias. Just honest results.<br><br>Some were decent. Most were disappointing. A few were outright terrible.<br><br>But one stood out so far above the rest that I had to write about it. That product is <strong>{product}</strong>.",
        "problemHeading": "What I Found When I Tested the Top Competitors",
        "problemBody": "I evaluated each product across five criteria: <strong>effectiveness, quality, value, ease of use, and customer satisfaction</strong>.<br><br>Here's what stood out about the competition:<br><br>• <strong>Brand A</strong> — Looks premium but underdelivers. Most customers report minimal improvement after weeks of use. Overpriced for what you get.<br><br>• <strong>Brand B</strong> — Decent results but terrible quality. Falls apart quickly and ends up costing more in replacements.<br><br>• <strong>Brand C</strong> — The budget option. You get what you pay for — which isn't much.<br><br>Then there's <strong>{product}</strong>. It outperformed every single competitor in <strong>all five categories</strong>. And it wasn't even close.",
        "consequenceHeading": "The Clear Winner — By Every Measure",
        "consequenceBody": "After months of testing, the results were unambiguous:<br><br><strong>{product} outperformed in effectiveness</strong> — Results were noticeably better, faster, and longer-lasting than any competitor. Most people feel the difference within days, not weeks.<br><br><strong>{product} outperformed in quality</strong> — The build quality, materials, and attention to detail are in a completely different league. This is a product built to last.<br><br><strong>{product} outperformed in value</strong> — When you factor in how long it lasts and how well it works, the cost per use is actually lower than most \"budget\" alternatives.",
        "solutionHeading": "Why {product} Beats Everything Else — The Full Breakdown",
        "solutionBody": "Here's the full comparison breakdown:<br><br>• <strong>Effectiveness:</strong> {product} delivered noticeable results in days. The closest competitor took weeks — and the results were less dramatic.<br><br>• <strong>Quality:</strong> Premium materials and construction that's clearly built to last. Competitors felt cheap by comparison.<br><br>• <strong>Value:</strong> While not the cheapest upfront, the per-use cost and longevity make it the best value by far.<br><br>• <strong>Customer Satisfaction:</strong> 4.8/5 average across thousands of reviews. No competitor came close to this level of consistent positive feedback.<br><br>• <strong>Ease of Use:</strong> Simple, intuitive, and works exactly as described. No complicated setup or confusing instructions.",
    },
}


def _offer(headline: str, subtext: str, **extra) -> dict:
    return {"type": "offerBox", "headline": headline, "subtext": subtext, "buttonText": "GET YOURS NOW",
            "guarantee": "60-Day Money-Back Guarantee", **extra}


_TRUST = {"type": "guarantee", "text": _TRUST_BAR}

SKELETON = [
    {"type": "text", "content": '<div class="adv-breadcrumb">Home &gt; [Your Category] &gt; {product}</div>'},
    {"type": "headline", "text": "@headline", "size": "large"},
    {"type": "authorByline", "author": "[Author Name]", "date": "{date_numeric}",
     "viewCount": "[XXX,XXX] views", "liveViewers": "[XXX]"},
    {"type": "image", "label": "Insert hero image — eye-catching product or lifestyle shot",
     "hint": "High-impact visual that draws readers in", "src": "{product_image}", "height": "400px"},
    {"type": "text", "content": "@hook"},

    # ── Problème / conséquences / solution ──
    {"type": "headline", "text": "@problemHeading", "size": "medium"},
    {"type": "text", "content": "@problemBody"},
    {"type": "headline", "text": "@consequenceHeading", "size": "medium"},
    {"type": "text", "content": "@consequenceBody"},
    {"type": "headline", "text": "@solutionHeading", "size": "medium"},
    {"type": "text", "content": "@solutionBody"},
    {"type": "image", "label": "Insert product detail or in-use photo",
     "hint": "Show the product up close or being used in real life", "height": "320px"},

    _offer("Special Offer", "Try {product} today and experience the difference for yourself."),
    dict(_TRUST),
    {"type": "testimonials", "heading": "Thousands Have Already Transformed Their Lives With {product}", "testimonials": [
        {"quote": "After years of trying everything without success, {product} changed everything. Within weeks I noticed a dramatic difference. I finally feel confident again. I've already told all my friends about it!",
         "name": "[Customer Name], [Age], [Location]", "detail": "Verified Buyer"},
        {"quote": "I was skeptical at first — I've been burned by so many products before. But {product} actually delivered on its promises. The quality is obvious from day one. I wish I'd found this years ago!",
         "name": "[Customer Name], [Age], [Location]", "detail": "Verified Buyer"},
        {"quote": "I noticed results after my FIRST USE. By week two, the improvement was dramatic. The unexpected bonus? It simplified my entire routine. I could never go back to what I was using before.",
         "name": "[Customer Name], [Age], [Location]", "detail": "Verified Buyer"},
    ]},
    _offer("Limited Time Offer", "Join the thousands who have already made the switch to {product}."),
    dict(_TRUST),

    # ── Renversement du risque ──
    {"type": "headline", "text": "Your Only Risk Is Missing Out ✨", "size": "medium"},
    {"type": "text", "content": "Ask yourself honestly:<br><br>…Do you want to keep dealing with the same frustrating problem? ❌<br><br>…Do you want to continue wasting money on products that don't work? ❌<br><br>…Do you want to keep wondering \"what if\" while others enjoy real results? ❌<br><br>…Do you want to look back in 6 months wishing you'd started today? ❌<br><br>Or are you ready to finally experience what a <strong>real solution</strong> feels like?<br><br>The choice is simple. <strong>{product} starts working from day one.</strong><br><br>Within days, you'll wonder how you ever lived without it."},
    _offer("Try It Risk-Free", "Experience {product} with zero risk. Love it or get a full refund."),
    dict(_TRUST),
    {"type": "headline", "text": "You've Got 60 Days To Try It On Us…", "size": "medium"},
    {"type": "text", "content": "That's right — you can try <strong>{product}</strong> with absolutely zero risk.<br><br>We're so confident in what it will do for you that we'll <strong>personally refund every penny</strong> if you're not absolutely thrilled.<br><br>We're <strong>real people</strong>, not some faceless corporation. Have questions? Our support team answers every message personally within hours.<br><br>Your payment is <strong>100% safe and secure</strong> through our encrypted checkout system. We ship directly from our warehouse within 24 hours.<br><br>Because 60 days from now, you'll either be enjoying incredible results…<br><br><strong>Or wishing you had started today.</strong>"},
    _offer("Best Deal of the Year", "Order {product} today and save. Free shipping included.",
           urgency="Limited time offer — while supplies last"),
    dict(_TRUST),

    {"type": "note", "style": "warning",
     "text": "<strong>Update</strong><br><br><strong>As of {date_numeric}</strong>, due to popular demand, {product} has been in and out of stock. We recommend you order as soon as possible because stock moves fast and there's often a waiting list.<br><br><strong>To see if they are still available and in stock, click the button above.</strong>"},
    {"type": "comments", "heading": "Comments (18)", "comments": [
        {"name": "[Customer Name]", "likes": "47", "timeAgo": "2 hours ago",
         "text": "I was super skeptical at first but a friend actually recommended {product}. After using it for 2 months, the results have been incredible! It actually delivers on what it promises. Worth every penny!"},
        {"name": "[Customer Name]", "likes": "31", "timeAgo": "5 hours ago",
         "text": "Got this as a gift and wasn't expecting much. Within 3 weeks I was completely converted. I've already bought one for my parents and sister because everyone deserves this!"},
        {"name": "[Brand] Team", "timeAgo": "4 hours ago",
         "text": "Thanks for sharing your experience! We love hearing success stories. Keep us updated on your continued results! 💚"},
        {"name": "[Customer Name]", "likes": "28", "timeAgo": "1 day ago",
         "text": "Been using {product} for 3 months now. The difference is NIGHT AND DAY. Already bought a second one. This is the real deal."},
        {"name": "[Customer Name]", "likes": "52", "timeAgo": "2 days ago",
         "text": "ATTENTION: This isn't just hype! I've tried everything in this category for years. Nothing has come close to {product}. Game changer."},
        {"name": "[Customer Name]", "likes": "19", "timeAgo": "3 days ago",
         "text": "Mine arrived yesterday and I noticed a difference immediately! Will update with more results soon. So far, very impressed."},
    ]},
    {"type": "disclaimer", "text": PREMADE_DISCLAIMER},
]

ARCHETYPE = {
    "id":            "personal-story",
    "name":          "Personal Story",
    "description":   "Long-form native ad with personal narrative, emotional hooks, multiple CTAs, trust badges, testimonials, and a realistic comments section.",
    "default_angle": "Pain",
    "copy":          COPY,
    "skeleton":      SKELETON,
}
