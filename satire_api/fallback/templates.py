"""Fallback phrase tables.

Two shapes are kept side by side:
    - `TEMPLATES`: per-language literary templates, four short and four long
      candidates each, all declarative written register.
    - `GENERIC_TEMPLATES`: one short/long pair shared by every language that
      openly signals degraded operation.

Every template carries exactly one `{word}` slot.
"""

from types import MappingProxyType
from typing import NamedTuple, Tuple


class TemplateSet(NamedTuple):
    short: Tuple[str, ...]
    long: Tuple[str, ...]


GENERIC_TEMPLATES = TemplateSet(
    short=("Satire is offline; {word} escapes for now.",),
    long=("The satire engine is resting, so {word} keeps its dignity a little longer.",),
)


_EN = TemplateSet(
    short=(
        "{word} is an excuse.",
        "{word} exposes the gap.",
        "{word} is merely a badge.",
        "{word} thins responsibility.",
    ),
    long=(
        "{word} inflates promises while starving substance.",
        "{word} is a substitute for certainty that obscures accountability.",
        "{word} delays decisions while costs accumulate.",
        "{word} is a deadline disguised as hope.",
    ),
)

TEMPLATES = MappingProxyType({
    "ja": TemplateSet(
        short=(
            "{word}とは、単なる口実である。",
            "{word}は、齟齬を露わにする。",
            "{word}は、記章に過ぎない。",
            "{word}は、責任を希釈する。",
        ),
        long=(
            "{word}は約束を膨らませ、中身だけを痩せさせる。",
            "{word}とは、責任の所在を曖昧にする安易な方便である。",
            "{word}を唱えるほど決断は遅れ、費用だけが積み上がる。",
            "{word}とは、希望の衣をまとった締切である。",
        ),
    ),
    "en": _EN,
    "zh-rCN": TemplateSet(
        short=(
            "{word}只是借口。",
            "{word}暴露了落差。",
            "{word}不过是一个标记。",
            "{word}稀释了责任。",
        ),
        long=(
            "{word}只会吹大承诺，稀释实质。",
            "{word}不过是廉价安慰，顺带模糊责任。",
            "{word}让决策迟缓，成本却在递增。",
            "{word}是披着希望外衣的最后期限。",
        ),
    ),
    "zh-rTW": TemplateSet(
        short=(
            "{word}只是藉口。",
            "{word}揭示了落差。",
            "{word}不過是一枚標記。",
            "{word}稀釋了責任。",
        ),
        long=(
            "{word}只會誇大承諾，掏空實質。",
            "{word}不過是廉價的撫慰，還把責任弄得模糊。",
            "{word}拖慢抉擇，成本卻節節上升。",
            "{word}是披著希望外衣的最後期限。",
        ),
    ),
    "es": TemplateSet(
        short=(
            "{word} es una excusa.",
            "{word} deja al descubierto la brecha.",
            "{word} no es más que una insignia.",
            "{word} diluye la responsabilidad.",
        ),
        long=(
            "{word} infla promesas y adelgaza el fondo.",
            "{word} no es más que un calmante que difumina la responsabilidad.",
            "{word} retrasa la decisión mientras el coste crece.",
            "{word} es un plazo disfrazado de esperanza.",
        ),
    ),
    "fr": TemplateSet(
        short=(
            "{word} est une excuse.",
            "{word} met l’écart à nu.",
            "{word} n’est qu’un insigne.",
            "{word} dilue la responsabilité.",
        ),
        long=(
            "{word} gonfle les promesses et affaiblit le fond.",
            "{word} n’est qu’un palliatif qui brouille la responsabilité.",
            "{word} retarde la décision tandis que le coût grimpe.",
            "{word} est une échéance travestie en espoir.",
        ),
    ),
    "pt": TemplateSet(
        short=(
            "{word} é um pretexto.",
            "{word} expõe a distância.",
            "{word} é só um emblema.",
            "{word} dilui a responsabilidade.",
        ),
        long=(
            "{word} incha promessas e esvazia o conteúdo.",
            "{word} é apenas um anestésico que turva a responsabilidade.",
            "{word} adia decisões enquanto os custos crescem.",
            "{word} é um prazo fantasiado de esperança.",
        ),
    ),
    "de": TemplateSet(
        short=(
            "{word} ist ein Vorwand.",
            "{word} legt die Kluft offen.",
            "{word} ist nur ein Abzeichen.",
            "{word} verdünnt die Verantwortung.",
        ),
        long=(
            "{word} bläht Versprechen auf und dünnt den Kern aus.",
            "{word} ist ein billiges Beruhigungsmittel, das Verantwortung verwischt.",
            "{word} verzögert Entscheidungen, während die Kosten steigen.",
            "{word} ist eine Frist im Gewand der Hoffnung.",
        ),
    ),
    "ko": TemplateSet(
        short=(
            "{word}는 변명에 불과하다.",
            "{word}는 간극을 드러낸다.",
            "{word}는 그저 표식일 뿐이다.",
            "{word}는 책임을 희석한다.",
        ),
        long=(
            "{word}는 약속만 부풀리고 실질을 소모한다.",
            "{word}는 책임을 흐리는 값싼 진정제다.",
            "{word}는 결정을 지연시키고 비용만 키운다.",
            "{word}는 희망을 걸친 마감일이다.",
        ),
    ),
    "hi": TemplateSet(
        short=(
            "{word} महज़ एक बहाना है।",
            "{word} खाई को उजागर करता है।",
            "{word} बस एक तमगा है।",
            "{word} ज़िम्मेदारी को पतला करता है।",
        ),
        long=(
            "{word} वादों को फुलाता है और सार को खोखला कर देता है।",
            "{word} ज़िम्मेदारी को धुंधला करने वाली सस्ती तसल्ली है।",
            "{word} फ़ैसलों को टालता है, जबकि लागत बढ़ती जाती है।",
            "{word} उम्मीद का लिबास ओढ़े एक समय-सीमा है।",
        ),
    ),
    "id": TemplateSet(
        short=(
            "{word} hanyalah alasan.",
            "{word} menyingkap kesenjangan.",
            "{word} sekadar lencana.",
            "{word} mengencerkan tanggung jawab.",
        ),
        long=(
            "{word} membesar-besarkan janji dan mengosongkan substansi.",
            "{word} hanyalah penenang murah yang mengaburkan tanggung jawab.",
            "{word} menunda keputusan sementara biaya membengkak.",
            "{word} adalah tenggat yang menyaru sebagai harapan.",
        ),
    ),
    "tr": TemplateSet(
        short=(
            "{word} bir mazerettir.",
            "{word} uçurumu açığa çıkarır.",
            "{word} sadece bir nişandır.",
            "{word} sorumluluğu seyreltir.",
        ),
        long=(
            "{word} vaatleri şişirir, özü zayıflatır.",
            "{word} sorumluluğu bulanıklaştıran ucuz bir tesellidir.",
            "{word} kararları erteler, maliyetleri artırır.",
            "{word} umut kılığına girmiş bir son tarihtir.",
        ),
    ),
    "ru": TemplateSet(
        short=(
            "{word} — это отговорка.",
            "{word} обнажает разрыв.",
            "{word} — лишь знак отличия.",
            "{word} размывает ответственность.",
        ),
        long=(
            "{word} раздувает обещания и истощает содержание.",
            "{word} — дешёвое успокоительное, размывающее ответственность.",
            "{word} тормозит решения, пока растут издержки.",
            "{word} — срок, замаскированный под надежду.",
        ),
    ),
    "bn": TemplateSet(
        short=(
            "{word} নিছক অজুহাত।",
            "{word} ফারাক উন্মোচন করে।",
            "{word} কেবল একটি প্রতীক।",
            "{word} দায় হালকা করে।",
        ),
        long=(
            "{word} প্রতিশ্রুতি ফোলায় এবং সারবস্তু শূন্য করে।",
            "{word} দায় ঝাপসা করা সস্তা সান্ত্বনা।",
            "{word} সিদ্ধান্ত পিছিয়ে দেয়, অথচ ব্যয় বাড়তেই থাকে।",
            "{word} আশার মুখোশ পরা এক সময়সীমা।",
        ),
    ),
    "sw": TemplateSet(
        short=(
            "{word} ni kisingizio.",
            "{word} hufichua pengo.",
            "{word} ni beji tu.",
            "{word} hupunguza uwajibikaji.",
        ),
        long=(
            "{word} huongeza ahadi na hupunguza kiini.",
            "{word} ni dawa ya bei rahisi inayoficha uwajibikaji.",
            "{word} huchelewesha maamuzi huku gharama zikiongezeka.",
            "{word} ni tarehe ya mwisho iliyojivika tumaini.",
        ),
    ),
    "ar": TemplateSet(
        short=(
            "{word} ذريعة لا غير.",
            "{word} يفضح الفجوة.",
            "{word} مجرد شارة.",
            "{word} يميّع المسؤولية.",
        ),
        long=(
            "{word} ينفخ الوعود ويفرغ المضمون.",
            "{word} مسكّن رخيص يطمس المسؤولية.",
            "{word} يؤخر الحسم فيما تتزايد التكلفة.",
            "{word} موعد نهائي متنكر بزي الأمل.",
        ),
    ),
    "mr": TemplateSet(
        short=(
            "{word} हा फक्त बहाणा आहे.",
            "{word} दरी उघड करते.",
            "{word} ही केवळ खूण आहे.",
            "{word} जबाबदारी पातळ करते.",
        ),
        long=(
            "{word} अपेक्षा फुगवते आणि आशय क्षीण करते.",
            "{word} जबाबदारी धूसर करणारा स्वस्त दिलासा आहे.",
            "{word} निर्णय लांबवते आणि खर्च वाढवते.",
            "{word} आशेच्या आवरणातील अंतिम मुदत आहे.",
        ),
    ),
    "te": TemplateSet(
        short=(
            "{word} కేవలం ఒక సాకు.",
            "{word} అంతరాన్ని బహిర్గతం చేస్తుంది.",
            "{word} కేవలం ఒక గుర్తు.",
            "{word} బాధ్యతను పలుచబరుస్తుంది.",
        ),
        long=(
            "{word} హామీలను ఉబ్బించి సారాన్ని తగ్గిస్తుంది.",
            "{word} బాధ్యతను మసకబార్చే చవకైన ఊరట.",
            "{word} నిర్ణయాన్ని ఆలస్యం చేస్తుంది, ఖర్చు మాత్రం పెరుగుతుంది.",
            "{word} ఆశ అనే వేషం వేసుకున్న గడువు.",
        ),
    ),
    "ta": TemplateSet(
        short=(
            "{word} ஒரு சாக்கு மட்டுமே.",
            "{word} இடைவெளியை வெளிப்படுத்துகிறது.",
            "{word} வெறும் அடையாளம்.",
            "{word} பொறுப்பை நீர்த்துப்போகச் செய்கிறது.",
        ),
        long=(
            "{word} வாக்குறுதியை ஊதிப் பெருக்கி உள்ளடக்கத்தை மெலிதாக்குகிறது.",
            "{word} பொறுப்பை மங்கச் செய்யும் மலிவான ஆறுதல்.",
            "{word} தீர்மானத்தைத் தள்ளிப்போடுகிறது, செலவு மட்டும் கூடுகிறது.",
            "{word} நம்பிக்கையின் முகமூடி அணிந்த கடைசி நாள்.",
        ),
    ),
    "vi": TemplateSet(
        short=(
            "{word} chỉ là cái cớ.",
            "{word} phơi bày khoảng trống.",
            "{word} chỉ là một phù hiệu.",
            "{word} làm loãng trách nhiệm.",
        ),
        long=(
            "{word} phóng đại lời hứa và làm rỗng ruột nội dung.",
            "{word} chỉ là liều xoa dịu rẻ tiền làm mờ trách nhiệm.",
            "{word} trì hoãn quyết định trong khi chi phí phình to.",
            "{word} là thời hạn khoác áo hy vọng.",
        ),
    ),
})
