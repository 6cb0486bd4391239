"""
Styles partagés du rendu advertorial.

PAGE_STYLE   : feuille embarquée (reset box-sizing, mobile ≤ 640px)
PAGE_SCRIPT  : masque le titre de page du thème hôte au-dessus du contenu
hex_to_rgba  : couleur d'accent + alpha → rgba()
escape_attr  : échappement des valeurs placées dans un attribut
"""
import re

_HEX_PAIR = re.compile(r"^[0-9a-fA-F]{2}$")

# Accent de repli quand la couleur fournie n'est pas un hex valide
FALLBACK_RGB = (99, 102, 241)


def escape_attr(text: str) -> str:
    """Échappe " et ' — le contenu d'élément, lui, passe tel quel."""
    return str(text).replace('"', "&quot;").replace("'", "&#039;")


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """'#abc' ou '#aabbcc' → 'rgba(r,g,b,a)'. Couleur invalide → accent de repli."""
    h = (hex_color or "").replace("#", "")
    full = h[0] * 2 + h[1] * 2 + h[2] * 2 if len(h) == 3 else h
    pairs = [full[0:2], full[2:4], full[4:6]]
    if not all(_HEX_PAIR.match(p) for p in pairs):
        r, g, b = FALLBACK_RGB
    else:
        r, g, b = (int(p, 16) for p in pairs)
    return f"rgba({r},{g},{b},{alpha:g})"


PAGE_STYLE = """<style>
.page-title,.article-template__title,h1.page-title,.page-header h1,.main-page-title,.template-page h1:first-of-type{display:none!important;}
.adv-content{box-sizing:border-box;width:100%;}
.adv-content *,.adv-content *::before,.adv-content *::after{box-sizing:border-box;}
.adv-content img{max-width:100%;height:auto;}
.adv-content{overflow-wrap:break-word;word-break:break-word;}
.adv-content mark{background:#fef08a;color:inherit;padding:2px 5px;border-radius:3px;}
.adv-content a{transition:opacity 0.15s ease;}
.adv-content a:hover{opacity:0.85;}
.adv-content details[open] summary span:last-child{content:"-";}
.adv-offer-btn{transition:transform 0.15s ease,box-shadow 0.15s ease;}
.adv-offer-btn:hover{transform:translateY(-1px);}
@media(max-width:640px){
  .adv-content{padding:20px 16px!important;font-size:1rem!important;}
  .adv-content h1{font-size:2rem!important;letter-spacing:-0.01em!important;}
  .adv-content h2{font-size:1.6rem!important;}
  .adv-content h3{font-size:1.3rem!important;}
  .adv-content p{font-size:1rem!important;}
  .adv-testimonials-grid{grid-template-columns:1fr!important;}
  .adv-stats-grid{grid-template-columns:repeat(2,1fr)!important;}
  .adv-stats-grid>div>div:first-child{font-size:2.5rem!important;}
  .adv-timeline-grid{grid-template-columns:1fr 1fr!important;}
  .adv-timeline-wrapper{padding:20px 16px!important;margin:32px 0!important;}
  .adv-cta-primary{padding:32px 18px!important;margin:32px 0!important;}
  .adv-cta-primary h2{font-size:1.55rem!important;}
  .adv-offer-box{padding:24px 18px!important;flex-direction:column!important;text-align:center!important;}
  .adv-offer-btn{width:100%!important;padding:16px!important;}
  .adv-img-placeholder{height:200px!important;}
  .adv-social-proof{gap:10px!important;padding:14px 12px!important;font-size:0.875rem!important;}
  .adv-numbered-section{margin-bottom:32px!important;padding-bottom:28px!important;}
  .adv-numbered-headline{font-size:1.4rem!important;}
  .adv-guarantee-badges{gap:20px!important;padding:20px 12px!important;}
  .adv-proscons-grid{grid-template-columns:1fr!important;}
  table{font-size:0.85rem!important;}
  table th,table td{padding:10px 10px!important;}
  details summary{padding:16px 18px!important;font-size:1rem!important;}
  .adv-pricing-grid{grid-template-columns:1fr!important;}
}
</style>"""

# Remonte au plus 5 parents et masque le premier frère précédent contenant un titre
PAGE_SCRIPT = """<script>
(function(){
  var c=document.querySelector('.adv-content');
  if(!c)return;
  var n=c;
  for(var i=0;i<5;i++){
    n=n.parentElement;
    if(!n||n===document.body)break;
    var h=n.previousElementSibling;
    if(h&&h.querySelector&&h.querySelector('h1')){h.style.display='none';break;}
  }
})();
</script>"""

CONTENT_STYLE = (
    "max-width:800px;margin:0 auto;padding:32px 24px;font-family:inherit;"
    "line-height:1.75;color:#374151;font-size:1.1rem;"
)
